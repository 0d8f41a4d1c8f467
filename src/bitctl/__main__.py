from bitctl.cli import cli

cli()
