"""
Helpers for the notification and pagination headers added to API responses.

Notification headers are prefixed with the `APP_NAME` configuration value:
    * X-<APP_NAME>-alert - human-readable message about the change
    * X-<APP_NAME>-error - key of the error that rejected the request
    * X-<APP_NAME>-params - identifier of the entity (or the entity name on error)
"""
from flask import current_app, url_for


def _prefix():
    return f"X-{current_app.config['APP_NAME']}"


def alert_headers(message: str, param) -> dict:
    return {
        f'{_prefix()}-alert': message,
        f'{_prefix()}-params': str(param),
    }


def entity_creation_alert(entity_name: str, param) -> dict:
    return alert_headers(f'A new {entity_name} is created with identifier {param}', param)


def entity_update_alert(entity_name: str, param) -> dict:
    return alert_headers(f'A {entity_name} is updated with identifier {param}', param)


def entity_deletion_alert(entity_name: str, param) -> dict:
    return alert_headers(f'A {entity_name} is deleted with identifier {param}', param)


def failure_alert(entity_name: str, error_key: str) -> dict:
    return {
        f'{_prefix()}-error': f'error.{error_key}',
        f'{_prefix()}-params': entity_name,
    }


def pagination_headers(pagination, endpoint: str) -> dict:
    """Build the X-Total-Count and Link headers for a page of results."""
    def link(page, rel):
        url = url_for(endpoint, page=page, per_page=pagination.per_page, _external=True)
        return f'<{url}>; rel="{rel}"'

    links = []
    if pagination.has_next:
        links.append(link(pagination.next_num, 'next'))
    if pagination.has_prev:
        links.append(link(pagination.prev_num, 'prev'))
    links.append(link(max(pagination.pages, 1), 'last'))
    links.append(link(1, 'first'))

    return {
        'X-Total-Count': str(pagination.total),
        'Link': ','.join(links),
    }
