from .main import app

app(prog_name="base64fix")
