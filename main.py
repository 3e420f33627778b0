from rich.pretty import pprint

from cmdtree import *

__prog__ = "deployer"


def staging(context, envName):
    context.require("envName")
    context.assert_args(envName=r"^[a-z][a-z0-9-]*$")
    context.success(f"deploying {envName} to staging")


def prod(context, envName, region):
    context.require_all()
    if not context.confirm(f"deploy {envName} to production ({region})?"):
        context.error("deployment cancelled")
    context.success(f"deploying {envName} to prod")


def status(context):
    pprint(context)


if __name__ == '__main__':
    dispatch(
        help={
            "deploy": {
                "_": "ship an environment",
                "staging": "deploy to staging",
                "prod": "deploy to production",
            },
            "status": "show the invocation context",
        },
        commands={
            "deploy": {"staging": staging, "prod": prod},
            "status": status,
        },
    )
