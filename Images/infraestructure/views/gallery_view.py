# Images/infraestructure/views/gallery_view.py
from datetime import datetime
from pathlib import Path
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def format_timestamp(value: datetime) -> str:
    """Fecha y hora local; el nombre del mes sale del locale del servidor, el año con 4 dígitos."""
    if value is None:
        return ""
    return value.astimezone().strftime("%d %b %Y, %H:%M:%S")


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["localtime"] = format_timestamp
