from violet.core.result import Failure, InvalidOutcomeError, Outcome, Success, fail, ok

__all__ = ["Failure", "InvalidOutcomeError", "Outcome", "Success", "fail", "ok"]
