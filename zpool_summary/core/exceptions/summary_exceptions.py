from typing import Dict, Any, List, Optional


class SummaryException(Exception):
    """Base exception for all pool summary operations"""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization"""
        return {
            'error_type': self.__class__.__name__,
            'message': str(self),
            'error_code': self.error_code,
            'details': self.details
        }


class CommandException(SummaryException):
    """External command exceptions"""
    pass


class CommandFailedError(CommandException):
    """Command exited unsuccessfully, timed out or could not be spawned"""

    def __init__(self, command: List[str], exit_code: int, stderr: str = ""):
        command_line = ' '.join(command)
        message = f"Command failed (exit code {exit_code}): {command_line}"
        if stderr:
            message += f"\nError: {stderr}"
        super().__init__(
            message,
            error_code="COMMAND_FAILED",
            details={
                "command": command_line,
                "exit_code": exit_code,
                "stderr": stderr
            }
        )
