"""배포 API 스모크 테스트 스크립트

사용법:
    python scripts/smoke_api.py <BASE_URL>

예시:
    python scripts/smoke_api.py https://your-app.railway.app
"""

import json
import sys
from typing import Any, Dict, Optional

import requests


def _call(url: str, params: Optional[Dict[str, Any]] = None, expected: int = 200) -> Dict[str, Any]:
    try:
        response = requests.get(url, params=params, timeout=10)
        is_json = response.headers.get("content-type", "").startswith("application/json")
        return {
            "status_code": response.status_code,
            "success": response.status_code == expected,
            "response": response.json() if is_json else response.text,
            "error": None,
        }
    except requests.RequestException as e:
        return {
            "status_code": None,
            "success": False,
            "response": None,
            "error": str(e),
        }


def check_health(base_url: str) -> Dict[str, Any]:
    """헬스 체크"""
    return _call(f"{base_url}/health")


def check_search(base_url: str) -> Dict[str, Any]:
    """텍스트 검색 (관련도 정렬)"""
    result = _call(f"{base_url}/exercises", params={"q": "supino", "size": 5})
    if result["success"]:
        body = result["response"]
        result["summary"] = {
            "total": body["meta"]["total"],
            "first": [ex["name"] for ex in body["data"][:3]],
        }
    return result


def check_suggestions(base_url: str) -> Dict[str, Any]:
    """결과 없는 검색 (오타) → 추천 블록"""
    result = _call(f"{base_url}/exercises", params={"q": "supinoo"})
    if result["success"]:
        result["summary"] = {"has_suggestions": "suggestions" in result["response"]}
    return result


def check_detail(base_url: str, exercise_id: str) -> Dict[str, Any]:
    """단건 조회"""
    return _call(f"{base_url}/exercises/{exercise_id}")


def check_not_found(base_url: str) -> Dict[str, Any]:
    """없는 ID → 404"""
    return _call(f"{base_url}/exercises/__missing__", expected=404)


def check_stats(base_url: str) -> Dict[str, Any]:
    """통계"""
    return _call(f"{base_url}/exercises/stats")


def main() -> int:
    if len(sys.argv) < 2:
        print("사용법: python scripts/smoke_api.py <BASE_URL>")
        return 1

    base_url = sys.argv[1].rstrip("/")
    results = {
        "health": check_health(base_url),
        "search": check_search(base_url),
        "suggestions": check_suggestions(base_url),
        "not_found": check_not_found(base_url),
        "stats": check_stats(base_url),
    }

    search = results["search"]
    if search["success"] and search["response"]["data"]:
        first_id = search["response"]["data"][0]["id"]
        results["detail"] = check_detail(base_url, first_id)

    failed = 0
    for name, result in results.items():
        mark = "OK " if result["success"] else "FAIL"
        print(f"[{mark}] {name}: {result['status_code']}")
        if result.get("summary"):
            print(f"       {json.dumps(result['summary'], ensure_ascii=False)}")
        if result["error"]:
            print(f"       error: {result['error']}")
        if not result["success"]:
            failed += 1

    print(f"\n{len(results) - failed}/{len(results)} 통과")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
