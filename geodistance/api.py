"""
HTTP adapter for geodistance.

GET /geodistance?lat1=..&lon1=..&lat2=..&lon2=..  -- distance between two points

Requires the optional `geodistance[api]` extra. Serve with:

    uvicorn geodistance.api:app
"""

__all__ = ['DistanceResponse', 'PointResponse', 'create_app']

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel

from geodistance._version import __version__
from geodistance.exceptions import InvalidCoordinate
from geodistance.report import QUERY_PARAMS, report_from_query
from geodistance.utils.logging import LOGGER

BAD_REQUEST_BODY = '400 Bad Request: invalid coordinate'
SERVER_ERROR_BODY = '500 Internal Server Error'


class PointResponse(BaseModel):
    lat: float
    lon: float


class DistanceResponse(BaseModel):
    source: PointResponse
    target: PointResponse
    dist_km: float
    dist_mi: float


def geodistance(request: Request) -> Response:
    """Distance between (lat1, lon1) and (lat2, lon2) in kilometers and miles"""
    query = {param: request.query_params.getlist(param) for param in QUERY_PARAMS}
    try:
        report = report_from_query(query)
    except InvalidCoordinate as exc:
        LOGGER.info('Rejected query %s: %s', request.url.query, exc)
        return PlainTextResponse(BAD_REQUEST_BODY, status_code=400)

    try:
        body = report.to_json()
    except (TypeError, ValueError):
        LOGGER.exception('Failed to serialize %r', report)
        return PlainTextResponse(SERVER_ERROR_BODY, status_code=500)

    return Response(body, media_type='application/json')


def create_app() -> FastAPI:
    app = FastAPI(
        title='geodistance',
        description=(
            'Ellipsoidal (WGS-84) distance between two latitude/longitude pairs, '
            'computed with the Andoyer-Lambert approximation.'
        ),
        version=__version__ or '0.0.0',
    )
    app.add_api_route(
        '/geodistance',
        geodistance,
        methods=['GET'],
        response_model=DistanceResponse,
        summary='Distance between two points',
        responses={400: {'description': 'A coordinate is missing, repeated, or invalid.'}},
    )
    return app


app = create_app()
