# main.py
import uvicorn

from emart.config.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("emart.main:app", host=settings.host, port=settings.port, reload=settings.reload)
