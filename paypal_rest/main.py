import uvicorn
from fastapi import FastAPI
from paypal_rest.api.routes import build_paypal_client, router
from paypal_rest.core.config import settings
from paypal_rest.core.logging import configure_logging

configure_logging(settings)

app = FastAPI(title=settings.app_name)
app.include_router(router, prefix=settings.api_prefix)


@app.on_event("shutdown")
async def _shutdown():
    # Only close a client that was actually built
    if build_paypal_client.cache_info().currsize:
        build_paypal_client().close()


if __name__ == "__main__":
    uvicorn.run("paypal_rest.main:app", host="0.0.0.0", port=8080, reload=False)
