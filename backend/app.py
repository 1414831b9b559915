# backend/app.py
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from brand_check.config import settings
from backend.routes import check as check_routes
from backend.schema import HealthOut

CHECK_PATH = "/api/check"

app = FastAPI(title="Brand Check API")

# CORS : seules les origines autorisées reçoivent les en-têtes
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.ALLOWED_ORIGINS),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(check_routes.router)


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    # corps absent, JSON invalide ou non-objet : même 400 qu'un prompt manquant
    if request.url.path == CHECK_PATH:
        return check_routes.bad_request("", check_routes.PROMPT_MISSING)
    return await request_validation_exception_handler(request, exc)


@app.get("/health", response_model=HealthOut)
def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
