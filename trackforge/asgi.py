# trackforge/asgi.py
"""
ASGI entrypoint para Uvicorn.

Exportamos tanto `fastapi_app` como `app` para que funcionen
indistintamente los comandos:
  - uvicorn trackforge.asgi:fastapi_app ...
  - uvicorn trackforge.asgi:app ...
"""
from .app import app as fastapi_app

app = fastapi_app
