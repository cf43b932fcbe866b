from nsaudit.cli import cli

cli()
