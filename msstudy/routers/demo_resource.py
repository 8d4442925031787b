"""Demo REST 资源 —— 仅协调层：校验 id 的有无，调用服务，翻译为 HTTP 状态码"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from loguru import logger

from ..core.config import settings
from ..core.exceptions import BadRequestAlertError
from ..core import headers as header_util
from ..features.demo.dependencies import get_demo_service
from ..features.demo.models import ID_MAX, ID_MIN, Demo
from ..features.demo.schemas import DemoPayload, DemoRead
from ..features.demo.service import DemoService

ENTITY_NAME = "msstudyDemo"

router = APIRouter(
    tags=["Demo"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "id 的有无不符合要求"},
        status.HTTP_404_NOT_FOUND: {"description": "资源不存在"},
    },
)


def parse_sort(sort: list[str] | None) -> list[tuple[str, bool]]:
    """把 `?sort=id,desc&sort=demofield` 解析成 [(字段, 是否降序), ...]"""
    orders: list[tuple[str, bool]] = []
    for item in sort or []:
        parts = [p.strip() for p in item.split(",") if p.strip()]
        if not parts:
            continue
        descending = False
        if parts[-1].lower() in ("asc", "desc"):
            descending = parts.pop().lower() == "desc"
        orders.extend((field, descending) for field in parts)
    return orders


@router.post(
    "/demos",
    response_model=DemoRead,
    status_code=status.HTTP_201_CREATED,
    summary="创建 Demo",
)
def create_demo(
    payload: DemoPayload,
    response: Response,
    service: DemoService = Depends(get_demo_service),
):
    logger.debug("REST request to save Demo : {}", payload)
    if payload.id is not None:
        raise BadRequestAlertError("A new demo cannot already have an ID", ENTITY_NAME, "idexists")
    result = service.save(Demo(demofield=payload.demofield))
    response.headers["Location"] = f"/api/demos/{result.id}"
    response.headers.update(
        header_util.create_entity_creation_alert(settings.app_name, ENTITY_NAME, str(result.id))
    )
    return result


@router.put("/demos", response_model=DemoRead, summary="更新 Demo")
def update_demo(
    payload: DemoPayload,
    response: Response,
    service: DemoService = Depends(get_demo_service),
):
    logger.debug("REST request to update Demo : {}", payload)
    if payload.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
    result = service.save(Demo(id=payload.id, demofield=payload.demofield))
    response.headers.update(
        header_util.create_entity_update_alert(settings.app_name, ENTITY_NAME, str(payload.id))
    )
    return result


@router.get("/demos", response_model=list[DemoRead], summary="查询全部 Demo")
def get_all_demos(
    sort: list[str] | None = Query(default=None, description="排序，如 id,desc"),
    service: DemoService = Depends(get_demo_service),
):
    logger.debug("REST request to get all Demos")
    return service.find_all(parse_sort(sort))


@router.get("/demos/{demo_id}", response_model=DemoRead, summary="Demo 详情")
def get_demo(
    demo_id: int = Path(ge=ID_MIN, le=ID_MAX),
    service: DemoService = Depends(get_demo_service),
):
    logger.debug("REST request to get Demo : {}", demo_id)
    demo = service.find_one(demo_id)
    if demo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Demo 不存在")
    return demo


@router.delete("/demos/{demo_id}", status_code=status.HTTP_204_NO_CONTENT, summary="删除 Demo")
def delete_demo(
    demo_id: int = Path(ge=ID_MIN, le=ID_MAX),
    service: DemoService = Depends(get_demo_service),
):
    logger.debug("REST request to delete Demo : {}", demo_id)
    service.delete(demo_id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=header_util.create_entity_deletion_alert(settings.app_name, ENTITY_NAME, str(demo_id)),
    )
