#!/usr/bin/env python3
"""
diffsplice - Servidor HTTP
Punto de entrada para levantar el servicio de parseo de diffs con uvicorn
"""

from diffsplice.config.settings import settings
from diffsplice.server import app  # noqa: F401


if __name__ == "__main__":
    import uvicorn

    print(f"🚀 diffsplice escuchando en http://{settings.host}:{settings.port}")
    uvicorn.run("diffsplice.server:app", host=settings.host, port=settings.port)
