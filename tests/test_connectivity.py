import signal
from unittest.mock import MagicMock, patch

import pytest
from pymongo.errors import ConfigurationError as PyMongoConfigurationError
from pymongo.errors import ServerSelectionTimeoutError

from app.db.connection import DatabaseConnection
from app.db.connectivity import TEST_COLLECTION, install_signal_handlers, run_connection_check


def connection_to(mongo_db, settings):
    client = MagicMock()
    client.admin.command.return_value = {"ok": 1.0}
    client.__getitem__.return_value = mongo_db
    return DatabaseConnection(settings, client_factory=MagicMock(return_value=client)), client


def test_successful_check_exits_zero_and_cleans_up(mongo_db, settings):
    mongo_db["users"].insert_one({"email": "jane@example.com"})
    connection, client = connection_to(mongo_db, settings)

    assert run_connection_check(connection) == 0
    assert mongo_db[TEST_COLLECTION].count_documents({}) == 0
    client.close.assert_called_once()
    assert not connection.is_connected


def test_missing_configuration_exits_one(settings):
    connection = DatabaseConnection(settings.model_copy(update={"MONGODB_URI": None}))
    assert run_connection_check(connection) == 1


def test_unreachable_server_exits_one(mongo_db, settings):
    connection, client = connection_to(mongo_db, settings)
    client.admin.command.side_effect = ServerSelectionTimeoutError("connection refused")

    assert run_connection_check(connection) == 1
    client.close.assert_called_once()


def test_signal_handlers_disconnect_and_exit_zero():
    connection = MagicMock()
    with patch("app.db.connectivity.signal.signal") as register:
        install_signal_handlers(connection)

    registered = {c.args[0]: c.args[1] for c in register.call_args_list}
    assert set(registered) == {signal.SIGINT, signal.SIGTERM}

    with pytest.raises(SystemExit) as excinfo:
        registered[signal.SIGTERM](signal.SIGTERM, None)
    assert excinfo.value.code == 0
    connection.disconnect.assert_called_once()


def test_unresolvable_host_exits_one(settings):
    factory = MagicMock(side_effect=PyMongoConfigurationError("The DNS query name does not exist"))
    connection = DatabaseConnection(settings, client_factory=factory)

    assert run_connection_check(connection) == 1
    assert not connection.is_connected
