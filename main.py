"""
Prompt Content Rating — Entry Point

Builds the shared infrastructure (EventBus, Config), rates one prompt,
and prints the result as JSON.
"""

import json
import logging
import os
import sys

import click

# Headless: no display is ever needed for rating.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QCoreApplication  # noqa: E402

from prompt_rating import Config, ContentRatingEngine, EventBus  # noqa: E402
from prompt_rating.safety import STRICTNESS_KEY, Strictness  # noqa: E402


@click.command()
@click.argument("prompt")
@click.option("--negative", "-n", default=None, help="Negative prompt text.")
@click.option("--characters", "-c", default=None, help="Character metadata text.")
@click.option(
    "--strictness", "-s", default=None,
    type=click.Choice([tier.value for tier in Strictness]),
    help="Override the stored strictness preference.",
)
@click.option(
    "--config", "config_path", default="prompt_rating.json",
    type=click.Path(dir_okay=False),
    help=f"Settings file holding '{STRICTNESS_KEY}'.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log the assessment to stderr.")
def main(prompt, negative, characters, strictness, config_path, verbose) -> None:
    """Rate PROMPT for moderation risk (1 = low, 5 = high)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    QCoreApplication.instance() or QCoreApplication(sys.argv[:1])

    bus = EventBus()
    config = Config(bus, path=config_path)
    engine = ContentRatingEngine(bus, config)

    result = engine.assess(prompt, negative, characters, strictness=strictness)
    click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
