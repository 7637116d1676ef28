from bkmk.cli.main import run

run()
