# app/main.py
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Import server configuration
from config import API_HOST, API_PORT, LOG_LEVEL, LOG_JSON
from logging_config import setup_logging
from errors import InvalidInputError

# Import the routers from your modules
from attendance_module import routes as attendance_routes
from calendar_module import routes as calendar_routes
from assistant_module import routes as assistant_routes
from reports_module import routes as reports_routes

setup_logging(level=LOG_LEVEL, json_output=LOG_JSON)
logger = logging.getLogger("holiday-planner")

# Create the main FastAPI application instance
app = FastAPI(
    title="AI Holiday Planner API",
    description="Attendance-aware leave planning: safe leave days, public holidays, long weekends and reports.",
    version="1.0.0"
)

# Add CORS middleware to allow cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Reversed periods and out-of-range values from the calculators
@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.info(f"Rejected request to {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# --- Include Module Routers ---

app.include_router(
    attendance_routes.router,
    prefix="/attendance",
    tags=["Attendance"]  # This groups the endpoints in the API docs
)

app.include_router(
    calendar_routes.router,
    prefix="/calendar",
    tags=["Calendar & Holidays"]
)

app.include_router(
    assistant_routes.router,
    prefix="/ai",
    tags=["AI Assistant"]
)

app.include_router(
    reports_routes.router,
    prefix="/export",
    tags=["Reports"]
)


# --- Root Endpoint ---
@app.get("/", tags=["Home"])
def read_root():
    """
    A welcome message for the planner API.
    """
    return {
        "message": "Welcome to the AI Holiday Planner API!",
        "api_docs": "/docs"
    }

# --- How to Run ---
if __name__ == "__main__":
    import uvicorn
    # To run this app from the project root: uvicorn main:app --reload
    uvicorn.run(app, host=API_HOST, port=API_PORT)
