from .cli import app

app(prog_name="precommit-check")
