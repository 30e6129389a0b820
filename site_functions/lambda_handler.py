"""AWS Lambda entry points, one per deployed function.

Each function wraps its own FastAPI app with the Mangum adapter so the
routes deploy and scale independently behind API Gateway. Point each
Lambda's handler setting at the matching name, e.g.
``site_functions.lambda_handler.submit_contact``.
"""

from mangum import Mangum

from site_functions.config import settings
from site_functions.main import create_app
from site_functions.routes import analytics, calcom, contact, hubspot


def _wrap(app) -> Mangum:
    # api_gateway_base_path strips the stage name from paths
    return Mangum(
        app, lifespan="off", api_gateway_base_path=settings.api_gateway_base_path
    )


submit_contact = _wrap(
    create_app([contact.router], cors_paths=[contact.PATH], title="Submit Contact")
)
hubspot_sync = _wrap(
    create_app([hubspot.router], cors_paths=[hubspot.PATH], title="HubSpot Sync")
)
calcom_webhook = _wrap(create_app([calcom.router], title="Cal.com Webhook"))
track_visitor = _wrap(
    create_app([analytics.router], cors_paths=[analytics.PATH], title="Track Visitor")
)
