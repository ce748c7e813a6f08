import importlib.util
from pathlib import Path

from ape.logging import logger

from deployment.step import DeployStep


def _load_module(filepath):
    module_name = f"deploy_{filepath.stem}"
    spec = importlib.util.spec_from_file_location(module_name, filepath)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def load_steps(directory):
    steps = []

    for filepath in sorted(Path(directory).glob("*.py")):
        if filepath.name.startswith("_"):
            continue

        module = _load_module(filepath)
        steps.extend(
            value for value in vars(module).values() if isinstance(value, DeployStep)
        )

    return steps


def select_steps(steps, tags=None):
    selected = [step for step in steps if step.matches(tags)]
    if not selected:
        requested = ", ".join(tags or ()) or "any"
        logger.warning(f"no deploy steps selected (tags: {requested})")

    return selected


def run_steps(context, steps):
    for step in steps:
        logger.info(f"running '{step.name}' ({', '.join(sorted(step.tags))})")
        step(context)
