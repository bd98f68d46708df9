from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def healthcheck(request: Request) -> dict:
    settings = request.app.state.settings
    return {
        "status": "ok",
        "environment": settings.environment,
        "llm_provider": settings.llm_provider,
        "booking_simulated": settings.booking_simulate,
    }
