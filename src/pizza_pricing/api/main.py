from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pizza_pricing import __version__
from pizza_pricing.api.quote_api import router as quote_router
from pizza_pricing.api import state

app = FastAPI(
    title="Pizza Pricing API",
    description="Prices pizza orders with day-of-week and bulk discounts",
    version=__version__
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include quote API
app.include_router(quote_router)


@app.get("/")
async def root():
    return {
        "status": "online",
        "message": "Pizza Pricing API Active",
        "today": state.engine.today().value,
    }
