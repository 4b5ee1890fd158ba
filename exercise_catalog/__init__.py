"""Exercise Catalog - 운동 카탈로그 검색 서비스

데이터: PT-BR 번역 운동 카탈로그 (data/exercises-pt-br.json)

주요 기능:
- 관련도 기반 텍스트 검색 + 필터 + 페이지네이션
- 결과가 적을 때 키워드 연관 그래프 기반 관련 운동 추천
- ID/부위/장비/타겟 조회, 랜덤 운동, 통계
"""

__version__ = "1.0.0"
