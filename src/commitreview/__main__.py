from commitreview.cli import app

app(prog_name="commit-review")
