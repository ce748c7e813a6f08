from deployment.context import DeployOptions
from deployment.step import deploy_step


@deploy_step(tags=["Footwears"])
def deploy_footwears(context):
    deployer = context.get_named_accounts()["deployer"]

    context.deployments.deploy(
        "Footwears",
        DeployOptions(sender=deployer, args=(), log=True),
    )
