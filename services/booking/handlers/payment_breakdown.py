from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications import QuotePaymentService
from services.booking.handlers.request_models import PaymentBreakdownRequest
from services.booking.handlers.response_models import payment_quote_response
from services.booking.handlers.settings import load_finance_policy
from services.shared.domain import DomainException
from services.shared.utils import api_response, error_response, parse_json_body

logger = Logger()

service = QuotePaymentService(policy=load_finance_policy())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """支払い見積もり Lambda Handler"""
    logger.info("Received payment breakdown request")

    try:
        request = PaymentBreakdownRequest.model_validate(parse_json_body(event))
        quote = service.quote(
            total_price=request.total_price,
            payment_type=request.payment_type,
            deposit_percentage=request.deposit_percentage,
        )
    except (ValidationError, DomainException) as e:
        logger.warning("Rejected payment breakdown request", extra={"error": str(e)})
        return error_response(e)
    except Exception:
        logger.exception("Failed to calculate payment breakdown")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, payment_quote_response(quote))
