"""
Alembic 마이그레이션 스크립트 디렉터리입니다. (script_location = identity:migrations)

리비전 그래프:
    0001 → 0002 → 0003 → 0004 → 0005          스키마와 모든 환경 공통 샘플 역할
                                  ├→ 0101 → 0102 → 0103    branch 'dev'
                                  ├→ 0201 → 0202 → 0203    branch 'uat'
                                  └→ 0301 → 0302           branch 'prod'

환경별 적용은 브랜치 라벨로 선택합니다. (예: alembic upgrade dev@head)
"""
