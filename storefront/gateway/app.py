# storefront/gateway/app.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from requests import RequestException
from starlette.concurrency import run_in_threadpool

from storefront import __version__
from storefront.api.routers.health import router as health_router
from storefront.gateway.proxy import UpstreamClient
from storefront.gateway.routing import RouteTable
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

FORWARDED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_gateway_app(
    route_table: RouteTable | None = None,
    client: UpstreamClient | None = None,
) -> FastAPI:
    app = FastAPI(title="Storefront gateway", version=__version__)
    app.state.service_name = "gateway"
    app.state.route_table = route_table or RouteTable.from_settings()
    app.state.upstream_client = client or UpstreamClient()

    #health is answered by the gateway itself, registered before the catch-all
    app.include_router(health_router)

    @app.api_route("/{path:path}", methods=FORWARDED_METHODS, include_in_schema=False)
    async def forward(request: Request):
        full_path = request.url.path
        base_url = request.app.state.route_table.resolve(full_path)

        if base_url is None:
            return JSONResponse(status_code=404, content={"error": "Not found"})

        body = await request.body()
        try:
            upstream = await run_in_threadpool(
                request.app.state.upstream_client.forward,
                request.method,
                base_url,
                full_path,
                request.url.query,
                body,
                request.headers.get("content-type"),
            )
        except RequestException as e:
            logger.error(f"Upstream {base_url} failed for {request.method} {full_path}: {e}")
            return JSONResponse(status_code=502, content={"error": "Upstream unavailable"})

        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            media_type=upstream.headers.get("content-type"),
        )

    return app
