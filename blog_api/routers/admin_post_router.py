from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from blog_api.services.db_service import get_db
from blog_api.schemas.post_schema import DisplayPost, PostCreate, PostUpdate
from blog_api.services.post_service import post_service
from blog_api.services.post_transformer import to_display_post, to_display_posts
from blog_api.services.publication_service import publication_service

router = APIRouter()

# 관리자 화면은 편집용이므로 본문을 정화하지 않고 원문 그대로 반환

# POST 전체 조회 (draft 포함)
@router.get("", response_model=List[DisplayPost])
def list_admin_posts(db: Session = Depends(get_db)):
    return to_display_posts(publication_service.list_admin(db))

# POST 생성
@router.post("", response_model=DisplayPost, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostCreate, db: Session = Depends(get_db)):
    return to_display_post(post_service.create_post(db, payload))

# POST 조회 By ID
@router.get("/{post_id}", response_model=DisplayPost)
def get_admin_post(post_id: str, db: Session = Depends(get_db)):
    return to_display_post(publication_service.get_admin_by_id(db, post_id))

# POST 업데이트 (전체 교체)
@router.put("/{post_id}", response_model=DisplayPost)
def update_post(post_id: str, payload: PostUpdate, db: Session = Depends(get_db)):
    return to_display_post(post_service.update_post(db, post_id, payload))

# POST 삭제
@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: str, db: Session = Depends(get_db)):
    post_service.delete_post(db, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# 공개 전환
@router.post("/{post_id}/publish", response_model=DisplayPost)
def publish_post(post_id: str, db: Session = Depends(get_db)):
    return to_display_post(publication_service.publish(db, post_id))

# 비공개(draft) 전환
@router.post("/{post_id}/unpublish", response_model=DisplayPost)
def unpublish_post(post_id: str, db: Session = Depends(get_db)):
    return to_display_post(publication_service.unpublish(db, post_id))
