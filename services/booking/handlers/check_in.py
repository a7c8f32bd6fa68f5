from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications import CheckInService
from services.booking.handlers.request_models import CheckInRequest
from services.booking.handlers.response_models import check_in_pass_response
from services.shared.domain import DomainException
from services.shared.utils import api_response, error_response, parse_json_body

logger = Logger()

service = CheckInService()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """チェックイン QR 発行 Lambda Handler"""
    logger.info("Received check-in pass request")

    try:
        request = CheckInRequest.model_validate(parse_json_body(event))
        check_in_pass = service.issue(request.booking)
    except (ValidationError, DomainException) as e:
        logger.warning("Rejected check-in pass request", extra={"error": str(e)})
        return error_response(e)
    except Exception:
        logger.exception("Failed to issue check-in pass")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, check_in_pass_response(check_in_pass))
