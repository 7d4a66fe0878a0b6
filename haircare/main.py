import logging

from fastapi import FastAPI

from haircare.api.v1.recommendations import router as recommendations_router
from haircare.api.v1.scans import router as scans_router
from haircare.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("scan_id", "user_id", "hair_type", "confidence", "status", "error", "reason", "image_name"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Smart Hair Care", version="1.0.0")

app.include_router(recommendations_router, prefix="/api/v1", tags=["recommendations"])
app.include_router(scans_router, prefix="/api/v1", tags=["scans"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
