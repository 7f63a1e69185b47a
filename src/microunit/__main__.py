from microunit.cli import app

app()
