"""
Custom exceptions raised by the API and persistence layers.
"""


class BadRequestAlertError(Exception):
    """客户端协议错误（例如新建时携带 id），映射为 400"""

    def __init__(self, message: str, entity_name: str, error_key: str):
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


class EntityNotFoundError(ValueError):
    """更新目标在库中不存在，映射为 404"""

    def __init__(self, entity_name: str, entity_id: int):
        super().__init__(f"{entity_name} with id {entity_id} does not exist")
        self.entity_name = entity_name
        self.entity_id = entity_id
