class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class InvalidArgumentException(DomainException, ValueError):
    """入力値が不正な場合（計算前に送出する）

    呼び出し側がエラーメッセージを組み立てられるよう、
    どの引数が・なぜ不正なのかを保持する。
    """

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"{argument}: {reason}")
        self.argument = argument
        self.reason = reason


class ComputationFailureException(DomainException):
    """複数ステップの導出処理中に想定外の失敗が発生した場合"""

    pass
