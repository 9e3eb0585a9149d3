"""
Request body normalization.

Clients send empty strings for blank form inputs and some older screens still
post legacy field names (``contact``, ``date``/``time``, ``patient_id`` on
bills).  Everything here maps such bodies onto column values before they reach
the SQL layer.
"""


def or_none(value):
    return value or None


def or_default(value, default):
    return value or default


def first_of(body, *names):
    """Return the first truthy value among aliased keys of ``body``.

    When none is truthy the last alias is returned as sent, so an empty
    string still reaches the store.
    """
    for name in names[:-1]:
        value = body.get(name)
        if value:
            return value
    return body.get(names[-1])


def room_number(value):
    if not value:
        return None
    value = str(value).strip()
    return value or None
