from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications import CheckInService
from services.booking.handlers.request_models import VerifyCheckInRequest
from services.booking.handlers.response_models import check_in_verification_response
from services.shared.domain import DomainException
from services.shared.utils import api_response, error_response, parse_json_body

logger = Logger()

service = CheckInService()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """チェックインコード照合 Lambda Handler"""
    logger.info("Received check-in verification request")

    try:
        request = VerifyCheckInRequest.model_validate(parse_json_body(event))
        valid = service.verify(
            request.booking, code=request.code, qr_data=request.qr_data
        )
    except (ValidationError, DomainException) as e:
        logger.warning("Rejected check-in verification request", extra={"error": str(e)})
        return error_response(e)
    except Exception:
        logger.exception("Failed to verify check-in code")
        return api_response(500, {"message": "Internal server error"})

    if not valid:
        logger.info("Check-in code did not match")
    return api_response(200, check_in_verification_response(valid))
