#!filepath: gdlogit/cli.py
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.markup import escape

from gdlogit import __version__, init_logging
from gdlogit.config.app_config import AppConfig
from gdlogit.config.training_config import Optimization
from gdlogit.data.loader import load_csv_dataset
from gdlogit.inference.predictor import Predictor
from gdlogit.training.report import ModelReportEngine
from gdlogit.utils.errors import ModelIOError, ModelSaveError, UserInputError
from gdlogit.workflows.predict_workflow import run_inference
from gdlogit.workflows.train_workflow import build_training_config, train_model

app = typer.Typer(help="Logistic regression trained by gradient descent")


def _fail(e: Exception) -> None:
    print(f"[red]{escape(str(e))}[/red]")
    raise typer.Exit(code=1)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def train(
    data: Path = typer.Argument(..., help="CSV with a header; label in the last column"),
    model: Optional[Path] = typer.Option(None, "--model", "-m", help="output model file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config"),
    label: Optional[str] = typer.Option(None, "--label", help="label column name"),
    optimizer: Optional[Optimization] = typer.Option(None, "--optimizer", "-o"),
    learning_rate: Optional[float] = typer.Option(None, "--learning-rate", "--lr"),
    epochs: Optional[int] = typer.Option(None, "--epochs", "-e"),
    batch_size: Optional[int] = typer.Option(None, "--batch-size", "-b"),
    seed: Optional[int] = typer.Option(None, "--seed"),
):
    """
    Train on DATA and write the model file.
    """
    try:
        app_cfg = AppConfig.load(str(config) if config else None)
        init_logging(app_cfg.log)

        dataset = load_csv_dataset(data, label_column=label)
        cfg = build_training_config(
            app_cfg.training,
            optimizer=optimizer,
            learning_rate=learning_rate,
            epochs=epochs,
            batch_size=batch_size,
            seed=seed,
        )
        result = train_model(dataset, cfg, model_path=model)
        metrics = ModelReportEngine().evaluate(
            predictor=Predictor(result.params, activation=cfg.activation),
            dataset=dataset,
        )
    except (UserInputError, ModelSaveError, FileNotFoundError) as e:
        _fail(e)

    print(f"[green]model saved -> {result.model_path}[/green]")
    print(
        f"epochs_run={result.metrics['epochs_run']} "
        f"final_cost={result.metrics['final_cost']:.6f} "
        f"converged={result.metrics['converged']}"
    )
    print({k: round(v, 4) for k, v in metrics.items()})


@app.command()
def predict(
    model: Path = typer.Argument(..., help="model file"),
    features: List[float] = typer.Argument(..., help="feature values (use -- before negatives)"),
):
    """
    Print the positive-class probability for one feature vector.
    """
    try:
        prob = run_inference(features, len(features), model)
    except (UserInputError, ModelIOError) as e:
        _fail(e)

    print(f"{prob:.6f}")


@app.command()
def evaluate(
    model: Path = typer.Argument(..., help="model file"),
    data: Path = typer.Argument(..., help="CSV with a header; label in the last column"),
    label: Optional[str] = typer.Option(None, "--label", help="label column name"),
    threshold: float = typer.Option(0.5, "--threshold", "-t"),
):
    """
    Score a saved model on a labelled CSV.
    """
    try:
        predictor = Predictor.from_file(model)
        dataset = load_csv_dataset(data, label_column=label, feature_length=predictor.feature_length)
        metrics = ModelReportEngine().evaluate(
            predictor=predictor, dataset=dataset, threshold=threshold
        )
    except (UserInputError, ModelIOError, FileNotFoundError) as e:
        _fail(e)

    print({k: round(v, 4) for k, v in metrics.items()})


if __name__ == "__main__":
    app()

# python -m gdlogit.cli train data/and.csv --model models/and.bin --lr 0.1 --epochs 1000
