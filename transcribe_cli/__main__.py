from transcribe_cli.cli import app

app(prog_name="transcribe-cli")
