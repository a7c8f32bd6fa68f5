from aws_lambda_powertools import Logger


def get_logger(service_name: str) -> Logger:
    """ドメイン層用のロガーを取得する

    Lambda Handler 側の Logger と同じ出力形式（構造化 JSON）で出力される。
    """
    return Logger(service=service_name)
