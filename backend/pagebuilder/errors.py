import logging

from flask import jsonify

from pagebuilder.domain.exceptions import PageBuilderError, PersistenceError

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    @app.errorhandler(PersistenceError)
    def handle_persistence_error(error):
        # Detail stays in the log; the client gets the generic message.
        logger.error(
            "Persistence failure operation=%s slug=%s: %s (cause: %r)",
            error.operation, error.slug, error, error.cause,
        )
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(PageBuilderError)
    def handle_page_builder_error(error):
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response
