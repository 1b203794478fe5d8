from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from treasury_relay.core.config import settings
from treasury_relay.core.logging import configure_logging
from treasury_relay.api.routes.rates import router as rates_router

configure_logging(settings.log_level)

app = FastAPI(title="treasury-relay")

origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

@app.get("/health")
def health():
    return {"status": "ok"}

app.include_router(rates_router)
