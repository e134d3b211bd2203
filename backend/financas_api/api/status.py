from fastapi import APIRouter, Request

router = APIRouter(tags=["status"])


@router.get("/")
def root():
    return {"message": "API de Finanças está online!"}


@router.get("/health")
def health(request: Request):
    settings = request.app.state.settings
    return {
        "ok": True,
        "service": "financas-api",
        "env": settings.ENV,
        "version": request.app.version,
        "api_key_enabled": bool(settings.API_KEY_ENABLED),
    }
