import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from airline_ops.config import settings
from airline_ops.database import Base, SessionLocal, engine
from airline_ops.exceptions import AirlineOpsError
from airline_ops.routers import aircraft_router, booking_router, flight_router
from airline_ops.seed import seed_aircraft

# START COMMAND:
# uvicorn airline_ops.main:app --reload

logger = logging.getLogger(__name__)

MISSING_ERROR_TYPES = {"missing", "string_too_short"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Error connecting to database %s: %s", engine.url.render_as_string(), exc)
        raise
    logger.info("Connected to %s database", engine.dialect.name)

    Base.metadata.create_all(bind=engine)
    if settings.SEED_AIRCRAFT:
        with SessionLocal() as db:
            seed_aircraft(db)
    yield


app = FastAPI(title="Airline operations", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(aircraft_router, prefix=f"{settings.API_PREFIX}/aircraft", tags=["aircraft"])
app.include_router(flight_router, prefix=f"{settings.API_PREFIX}/flights", tags=["flights"])
app.include_router(booking_router, prefix=f"{settings.API_PREFIX}/bookings", tags=["bookings"])


def describe_validation_errors(errors) -> str:
    missing, invalid = [], []
    for error in errors:
        loc = error.get("loc", ())
        # ("body", "<field>", ...) for fields; a bare ("body",) means the body itself is unusable
        if len(loc) < 2:
            return "Invalid request body"
        field = str(loc[1])
        is_missing = error.get("type") in MISSING_ERROR_TYPES or error.get("input") is None
        target = missing if is_missing else invalid
        if field not in target:
            target.append(field)
    if missing:
        if len(missing) == 1:
            return f"Missing required field: {missing[0]}"
        return f"Missing required fields: {', '.join(missing)}"
    return f"Invalid value for field: {', '.join(invalid)}"


@app.exception_handler(AirlineOpsError)
async def airline_ops_error_handler(request: Request, exc: AirlineOpsError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": describe_validation_errors(exc.errors())},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})
