"""History endpoints: list, download, delete one, clear all."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from morphlab.api.download import svg_attachment
from morphlab.dependencies import get_store
from morphlab.history.store import HistoryStore
from morphlab.models.responses import HistoryItemResponse

router = APIRouter(prefix="/history")


@router.get("", response_model=list[HistoryItemResponse])
async def list_history(store: HistoryStore = Depends(get_store)) -> list[HistoryItemResponse]:
    return [HistoryItemResponse.from_item(item) for item in store.get_all()]


@router.get("/{item_id}/download")
async def download_history_item(item_id: str, store: HistoryStore = Depends(get_store)) -> Response:
    item = store.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"History item {item_id} not found")
    return svg_attachment(item.result_svg, item.timestamp_ms)


@router.delete("/{item_id}", status_code=204)
async def delete_history_item(item_id: str, store: HistoryStore = Depends(get_store)) -> Response:
    if not store.delete_by_id(item_id):
        raise HTTPException(status_code=404, detail=f"History item {item_id} not found")
    return Response(status_code=204)


@router.delete("", status_code=204)
async def clear_history(store: HistoryStore = Depends(get_store)) -> Response:
    store.clear_all()
    return Response(status_code=204)
