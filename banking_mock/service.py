"""Process context wiring config, generators, stores and handlers."""

import logging
from typing import Any, Callable, Mapping

from banking_mock.clock import Clock, utcnow
from banking_mock.config import MockBankConfig
from banking_mock.exceptions import ApiError
from banking_mock.generators.banking import MockDataGenerators
from banking_mock.handlers.accounts import AccountHandler
from banking_mock.handlers.auth import authenticate, describe_credentials
from banking_mock.handlers.base import ApiResponse
from banking_mock.handlers.beneficiaries import BeneficiaryHandler
from banking_mock.handlers.context import RequestContext
from banking_mock.handlers.errors import error_response, internal_error
from banking_mock.handlers.health import health
from banking_mock.handlers.payments import PaymentHandler
from banking_mock.handlers.statements import StatementHandler
from banking_mock.handlers.transactions import TransactionHandler
from banking_mock.logging import request_extra
from banking_mock.store.memory import BankingDataStore
from banking_mock.store.seed import seed_store

logger = logging.getLogger(__name__)


class BankingService:
    """Owns one seeded data set and the handlers that serve it.

    Requests are expected to run one at a time; the stores are plain dicts
    with no locking.

    Parameters
    ----------
    config : MockBankConfig | None
        Service configuration (defaults apply when omitted).
    clock : Clock | None
        Time source for generators and handlers.
    store : BankingDataStore | None
        Pre-built store; seeded from ``config.seed_data`` when omitted.
    """

    def __init__(
        self,
        config: MockBankConfig | None = None,
        clock: Clock | None = None,
        store: BankingDataStore | None = None,
    ) -> None:
        self.config = config or MockBankConfig()
        self.clock = clock or utcnow
        self.generators = MockDataGenerators.create(
            seed=self.config.seed, locale=self.config.locale, clock=self.clock
        )
        self.store = store or seed_store(self.config.seed_data, self.generators)

        self.accounts = AccountHandler(self.store, self.generators, self.config, self.clock)
        self.transactions = TransactionHandler(self.store, self.config)
        self.payments = PaymentHandler(self.store, self.generators, self.config, self.clock)
        self.beneficiaries = BeneficiaryHandler(self.store, self.generators, self.config)
        self.statements = StatementHandler(self.store, self.generators)

    def health(self) -> ApiResponse:
        return health(self.config.api_version, self.clock)

    def invoke(
        self,
        operation: Callable[..., ApiResponse],
        *args: Any,
        headers: Mapping[str, str] | None = None,
        authenticated: bool = True,
    ) -> ApiResponse:
        """Run one handler call the way the HTTP layer would.

        Builds the request context, logs the call, checks credentials when
        ``authenticated`` is set and turns any error into the common error
        envelope. Correlation headers are attached to every response.

        Parameters
        ----------
        operation : Callable[..., ApiResponse]
            Bound handler method, e.g. ``service.accounts.get_account``.
        *args : Any
            Positional arguments for the handler.
        headers : Mapping[str, str] | None
            Request headers.
        authenticated : bool
            Whether the operation requires credentials.

        Returns
        -------
        ApiResponse
            Handler response or shaped error response.
        """
        context = RequestContext.from_headers(headers, self.clock)
        name = getattr(operation, "__qualname__", repr(operation))
        credentials = describe_credentials(headers)

        logger.info(
            "%s - Correlation ID: %s%s",
            name,
            context.correlation_id,
            f" | Auth: {credentials}" if credentials else "",
            extra=request_extra(context.correlation_id, name),
        )

        try:
            if authenticated:
                authenticate(headers)
            response = operation(*args)
        except ApiError as exc:
            logger.warning(
                "%s failed: %s %s",
                name,
                exc.code,
                exc.message,
                extra=request_extra(
                    context.correlation_id, name, code=exc.code, status=exc.status_code
                ),
            )
            response = error_response(exc, context)
        except Exception:
            logger.exception(
                "%s raised an unexpected error",
                name,
                extra=request_extra(context.correlation_id, name),
            )
            response = error_response(internal_error(), context)

        response.headers.update(context.response_headers(self.config.api_version))
        return response
