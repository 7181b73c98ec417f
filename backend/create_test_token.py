import sys
import os
from datetime import timedelta
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.core.security import create_access_token

def create_test_token(user_id: str = "test-user") -> str:
    """테스트용 액세스 토큰 발급 (로그인은 외부 인증 서버 담당)"""
    token = create_access_token({"sub": user_id}, expires_delta=timedelta(days=1))
    print("✅ 테스트 토큰 발급 완료")
    print(f"   사용자 ID: {user_id}")
    print(f"   Authorization: Bearer {token}")
    return token

if __name__ == "__main__":
    create_test_token(sys.argv[1] if len(sys.argv) > 1 else "test-user")
