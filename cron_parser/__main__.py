from cron_parser.cli import app

app(prog_name="cron-parser")
