from azurerm_plugin.cli.main import run

run()
