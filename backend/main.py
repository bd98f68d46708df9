from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trip_planner.api import routes_booking, routes_health, routes_plan, routes_pois
from trip_planner.core.config import Settings, get_settings
from trip_planner.core.logging import configure_logging
from trip_planner.llm.backends import build_backend
from trip_planner.llm.client import GenerativeClient
from trip_planner.llm.tools.booking_tool import BookingBackendTool
from trip_planner.llm.tools.payment_tool import PaymentTool
from trip_planner.llm.tools.places_tool import PlacesTool
from trip_planner.llm.tools.weather_tool import WeatherTool
from trip_planner.services.booking_service import BookingService
from trip_planner.services.planning_service import PlanningService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version="0.2.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    timeout = settings.http_timeout_seconds
    weather_tool = WeatherTool(
        api_key=settings.weather_api_key,
        geo_url=settings.geo_base_url,
        forecast_url=settings.weather_base_url,
        timeout=timeout,
    )
    generative_client = GenerativeClient(
        backend=build_backend(settings),
        timeout=settings.generation_timeout_seconds,
    )

    app.include_router(routes_health.router, tags=["health"])
    for prefix in ("", "/v1"):
        listed = prefix == ""
        app.include_router(routes_plan.router, prefix=prefix, tags=["planning"], include_in_schema=listed)
        app.include_router(routes_booking.router, prefix=prefix, tags=["booking"], include_in_schema=listed)
        app.include_router(routes_pois.router, prefix=prefix, tags=["places"], include_in_schema=listed)

    # Services are built once and shared read-only across requests
    app.state.settings = settings
    app.state.planning_service = PlanningService(
        weather_tool=weather_tool, generative_client=generative_client
    )
    app.state.booking_service = BookingService(
        backend=BookingBackendTool(
            base_url=settings.booking_api_base,
            api_key=settings.booking_api_key,
            timeout=timeout,
        ),
        payment_tool=PaymentTool(
            key_id=settings.razorpay_key_id,
            key_secret=settings.razorpay_key_secret,
            timeout=timeout,
        ),
        simulate=settings.booking_simulate,
    )
    app.state.places_tool = PlacesTool(api_key=settings.maps_api_key, timeout=timeout)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8080, reload=True)
