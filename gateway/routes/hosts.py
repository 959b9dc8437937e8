"""
Virtual host routing route
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
import structlog

from gateway.models.routing import HostRoute
from gateway.utils.route_table import RouteTable

logger = structlog.get_logger(__name__)

router = APIRouter()

NOT_FOUND_BODY = "404 page not found\n"


def get_route_table(request: Request) -> RouteTable:
    """Dependency to get the route table built at startup"""
    return request.app.state.route_table


@router.get(
    "/",
    response_model=HostRoute,
    responses={404: {"description": "Host is not routed"}},
)
async def route_host(request: Request, table: RouteTable = Depends(get_route_table)):
    """Report which route the request's Host header maps to"""
    raw_host = request.headers.get("host", "")
    outcome = table.resolve(raw_host)

    if outcome is None:
        logger.info("Host not routed", raw_host=raw_host)
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)

    logger.debug("Host routed", host=outcome.host, route=outcome.route)
    return outcome
