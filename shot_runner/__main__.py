from shot_runner.cli.app import app

app()
