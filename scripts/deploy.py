import os

from deployment.constants import DEPLOY_DIR, DEPLOY_TAGS_ENV, NAMED_ACCOUNTS_FILEPATH
from deployment.context import ApeDeploymentContext
from deployment.runner import load_steps, run_steps, select_steps


def requested_tags():
    raw = os.environ.get(DEPLOY_TAGS_ENV, "")
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def deploy(tags=None):
    context = ApeDeploymentContext.from_yaml(NAMED_ACCOUNTS_FILEPATH)
    steps = select_steps(load_steps(DEPLOY_DIR), tags)

    run_steps(context, steps)


def main():
    # DEPLOY_TAGS=Footwears ape run deploy --network ...
    deploy(requested_tags())
