from __future__ import annotations

import pytest

from ponto_auth.core import errors


@pytest.mark.parametrize(
    ("error_cls", "status_code"),
    [
        (errors.InvalidInput, 400),
        (errors.AlreadyExists, 400),
        (errors.NotFound, 400),
        (errors.InvalidCredentials, 400),
        (errors.InvalidOrExpiredToken, 400),
        (errors.Expired, 400),
        (errors.Unauthorized, 401),
        (errors.RateLimited, 429),
        (errors.ResourceNotFound, 404),
        (errors.StoreError, 500),
        (errors.NotificationError, 500),
    ],
)
def test_status_mapping(error_cls: type[errors.AuthWorkflowError], status_code: int) -> None:
    error = error_cls()

    assert error.status_code == status_code
    assert errors.status_for(error.kind) == status_code
    assert error.message


def test_every_kind_is_mapped() -> None:
    for kind in errors.ErrorKind:
        assert errors.status_for(kind) in {400, 401, 404, 429, 500}


def test_custom_message_overrides_default() -> None:
    error = errors.NotFound("Email não cadastrado")

    assert error.message == "Email não cadastrado"
    assert str(error) == "Email não cadastrado"
