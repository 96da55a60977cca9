from mdpress.cli import app

app(prog_name="mdpress")
