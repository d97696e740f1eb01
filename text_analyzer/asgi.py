# Process entry point: uvicorn text_analyzer.asgi:app
from text_analyzer.main import create_app

app = create_app()
