"""响应头工具：写操作成功 / 失败时附带的 X-<app>-alert 提示头"""
from __future__ import annotations

from urllib.parse import quote


def create_alert(application_name: str, message: str, param: str) -> dict[str, str]:
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote(param),
    }


def create_entity_creation_alert(application_name: str, entity_name: str, param: str) -> dict[str, str]:
    message = f"A new {entity_name} is created with identifier {param}"
    return create_alert(application_name, message, param)


def create_entity_update_alert(application_name: str, entity_name: str, param: str) -> dict[str, str]:
    message = f"A {entity_name} is updated with identifier {param}"
    return create_alert(application_name, message, param)


def create_entity_deletion_alert(application_name: str, entity_name: str, param: str) -> dict[str, str]:
    message = f"A {entity_name} is deleted with identifier {param}"
    return create_alert(application_name, message, param)


def create_failure_alert(application_name: str, entity_name: str, error_key: str) -> dict[str, str]:
    return {
        f"X-{application_name}-error": f"error.{error_key}",
        f"X-{application_name}-params": entity_name,
    }
