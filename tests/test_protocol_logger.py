# Area: Shared Tests
"""Tests for protocol logger."""

from overcookied_client._shared.protocol import INBOUND_TYPES, OUTBOUND_TYPES
from overcookied_client._shared.protocol_logger import (
    GREEN,
    ORANGE,
    RECEIVE_DISPLAY_NAMES,
    RED,
    RESET,
    SEND_DISPLAY_NAMES,
    ProtocolLogger,
    get_protocol_logger,
)


class TestMessageTypeMappings:
    """Tests for message type → display name mappings."""

    def test_every_inbound_type_has_display_name(self):
        assert set(RECEIVE_DISPLAY_NAMES) == INBOUND_TYPES

    def test_every_outbound_type_has_display_name(self):
        assert set(SEND_DISPLAY_NAMES) == OUTBOUND_TYPES

    def test_selected_names(self):
        assert RECEIVE_DISPLAY_NAMES["GAME_START"] == "MATCH-FOUND"
        assert SEND_DISPLAY_NAMES["COOKIE_CLICK"] == "CLAIM-COOKIE"


class TestProtocolLogger:
    """Tests for ProtocolLogger class."""

    def test_logger_creation(self):
        logger = ProtocolLogger()
        assert logger.role is None
        assert logger._get_role() == "--"

    def test_set_phase_none_defaults_to_idle(self):
        logger = ProtocolLogger()
        logger.set_phase("")
        assert logger._phase == "IDLE"

    def test_log_received_output(self, capsys):
        """Test log_received prints formatted output."""
        logger = ProtocolLogger(role="p2")
        logger.set_phase("PLAYING")
        logger.log_received("UPDATE", "3-4, 50s left")
        output = capsys.readouterr().out

        assert "RECEIVED" in output
        assert "SCOREBOARD" in output
        assert "PLAYING" in output
        assert "P2" in output
        assert "3-4, 50s left" in output
        assert GREEN in output
        assert RESET in output

    def test_log_sent_output(self, capsys):
        logger = ProtocolLogger()
        logger.log_sent("CLICK", "count=2")
        output = capsys.readouterr().out

        assert "SENT" in output
        assert "CLICK" in output
        assert "count=2" in output

    def test_unknown_type_shown_raw(self, capsys):
        ProtocolLogger().log_received("NEW_THING")
        assert "NEW_THING" in capsys.readouterr().out

    def test_log_local_output(self, capsys):
        ProtocolLogger().log_local("golden cookie cleared")
        output = capsys.readouterr().out
        assert "LOCAL" in output
        assert ORANGE in output

    def test_log_error_output(self, capsys):
        """Test log_error prints to stderr."""
        ProtocolLogger().log_error("Something went wrong")
        output = capsys.readouterr().err

        assert "[ERROR]" in output
        assert "Something went wrong" in output
        assert RED in output


class TestGetProtocolLogger:
    """Tests for get_protocol_logger singleton."""

    def test_returns_same_instance(self):
        assert get_protocol_logger() is get_protocol_logger()

    def test_is_protocol_logger_instance(self):
        assert isinstance(get_protocol_logger(), ProtocolLogger)
