from cronparser.cli import app

app(prog_name="cronparser")
