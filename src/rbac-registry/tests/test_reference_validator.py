"""Tests for the reference validator."""

import pytest
from unittest.mock import AsyncMock

from app.repositories.service_repository import ServiceRepository
from app.services.reference_validator import ReferenceValidator


@pytest.fixture
def repository(test_session):
    return ServiceRepository(test_session)


@pytest.mark.asyncio
async def test_empty_sequence_is_valid(repository):
    validator = ReferenceValidator(repository)
    assert await validator.validate_references([]) is True


@pytest.mark.asyncio
async def test_empty_sequence_skips_store():
    repository = AsyncMock(spec=ServiceRepository)
    validator = ReferenceValidator(repository)

    assert await validator.validate_references([]) is True
    repository.get_all_services.assert_not_called()


@pytest.mark.asyncio
async def test_all_known_identifiers(repository):
    billing = await repository.create("Billing", [{"_id": "op-1", "name": "read"}])
    await repository.create("Reports", [{"_id": "op-2", "name": "export"}])
    validator = ReferenceValidator(repository)

    assert billing.operations[0]["_id"] == "op-1"
    assert await validator.validate_references(["op-2", "op-1"]) is True
    assert await validator.validate_references(["op-1", "op-1"]) is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation_ids",
    [["unknown"], ["unknown", "op-1"], ["op-1", "unknown"], ["op-1", "op-2", "unknown"]],
)
async def test_unknown_identifier_anywhere(repository, operation_ids):
    await repository.create(
        "Billing", [{"_id": "op-1", "name": "read"}, {"_id": "op-2", "name": "write"}]
    )
    validator = ReferenceValidator(repository)

    assert await validator.validate_references(operation_ids) is False


@pytest.mark.asyncio
async def test_service_identifier_is_not_an_operation(repository):
    service = await repository.create("Billing", [{"_id": "op-1", "name": "read"}])
    validator = ReferenceValidator(repository)

    assert await validator.validate_references([service.id]) is False


@pytest.mark.asyncio
async def test_deleted_service_operations_no_longer_valid(repository):
    service = await repository.create("Billing", [{"_id": "op-1", "name": "read"}])
    validator = ReferenceValidator(repository)
    assert await validator.validate_references(["op-1"]) is True

    await repository.delete(service)
    assert await validator.validate_references(["op-1"]) is False
