from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import jwt
from nextmove.core.security import decode_token
from nextmove.db.session import SessionLocal
from nextmove.repositories.settings_repo import SettingsRepo
from nextmove.services.branding.provider import BrandingProvider, get_branding_provider
from nextmove.services.branding.service import BrandingService

bearer = HTTPBearer()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_current_user(creds: HTTPAuthorizationCredentials = Depends(bearer)):
    try:
        payload = decode_token(creds.credentials)
    except jwt.PyJWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    if not payload.get("sub"):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return {"id": payload["sub"], "role": payload.get("role")}

def role_required(*roles):
    def checker(user=Depends(get_current_user)):
        if user["role"] not in roles:
            raise HTTPException(status_code=403, detail="Permission denied")
        return user
    return checker

def get_branding_service(db=Depends(get_db)) -> BrandingService:
    return BrandingService(SettingsRepo(db))

def get_provider() -> BrandingProvider:
    return get_branding_provider()
