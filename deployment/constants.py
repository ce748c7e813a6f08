from ape import project

PROJECT_ROOT = project.path

DEPLOY_DIR = PROJECT_ROOT / "deploy"
DEPLOYMENTS_DIR = PROJECT_ROOT / "deployments"
NAMED_ACCOUNTS_FILEPATH = PROJECT_ROOT / "named-accounts.yml"

# Deployments on these networks are not written to disk
LOCAL_BLOCKCHAIN_ENVIRONMENTS = ("local",)

DEFAULT_NETWORK_KEY = "default"
DEPLOY_TAGS_ENV = "DEPLOY_TAGS"
