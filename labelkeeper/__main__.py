"""
CLI entry point, when used as a module: `python -m labelkeeper`.

Useful for debugging in the IDEs (use the start-mode "Module", module "labelkeeper").
"""
from labelkeeper import cli

if __name__ == '__main__':
    cli.main()
