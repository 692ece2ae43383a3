from typclip.cli import app

app(prog_name="typst-clip")
