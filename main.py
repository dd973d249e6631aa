"""
Hobby Analytics Service
FastAPI application for review scheduling and strength analytics

Run with: uvicorn main:app --reload --port 8000
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, PORT, configure_logging

configure_logging()

# Import routers
from routers import reviews_router, strength_router

# Create FastAPI app
app = FastAPI(
    title="Hobby Analytics",
    description="""
    ## Review Scheduling & Strength Analytics

    Stateless computations for the Hobby Hub apps. Send the current data,
    get the computed result back; nothing is stored.

    ### Reviews
    - **SM-2 Scheduling**: Next review date from a 0-5 recall grade
    - **Due Items**: Which items need reviewing today

    ### Strength
    - **1RM Calculator**: Estimated 1RM (Epley, Brzycki)
    - **Overload Trend**: Slope of recent top sets
    - **1RM History**: Estimated 1RM per recent session

    ---

    **Tech Stack**: Python, FastAPI, scikit-learn, pandas
    """,
    version="1.0.0",
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc"  # ReDoc alternative
)

# Configure CORS to allow requests from the frontend and main API
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """Check if the analytics service is running"""
    return {
        "status": "healthy",
        "service": "hobby-analytics",
        "version": "1.0.0"
    }


# Include routers
app.include_router(reviews_router)
app.include_router(strength_router)


# Root endpoint with service info
@app.get("/", tags=["Info"])
async def root():
    """Service information and available endpoints"""
    return {
        "service": "Hobby Analytics",
        "version": "1.0.0",
        "documentation": "/docs",
        "endpoints": {
            "reviews": {
                "new": "GET /reviews/new",
                "review": "POST /reviews",
                "due": "POST /reviews/due"
            },
            "strength": {
                "1rm_calculator": "GET /strength/1rm/calculate",
                "trend": "POST /strength/trend",
                "1rm_history": "POST /strength/1rm/history"
            }
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
