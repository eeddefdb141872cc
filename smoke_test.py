import os
import uuid

import requests

BASE_URL = os.getenv('HEALTHHUB_URL', 'http://localhost:3001')


def check(label, response, expected=200):
    ok = response.status_code == expected
    status = "✅ PASS" if ok else "❌ FAIL"
    print(f"  {status} {label} -> {response.status_code}")
    if not ok:
        print(f"     {response.text[:200]}")
    return ok


def run_smoke_test():
    print("🧪 HEALTHHUB SMOKE TEST")
    print("=" * 50)
    print(f"Target: {BASE_URL}")

    try:
        requests.get(f"{BASE_URL}/health", timeout=5)
    except requests.exceptions.ConnectionError as e:
        print(f"❌ Connection error: {e}")
        print(f"Make sure the API is running on {BASE_URL}")
        return False

    results = []
    session = requests.Session()

    print("\n🩺 SERVICE:")
    results.append(check("GET /health", session.get(f"{BASE_URL}/health", timeout=10)))
    results.append(check("GET /api", session.get(f"{BASE_URL}/api", timeout=10)))

    print("\n🌿 CONTENT:")
    results.append(check("GET /api/remedies", session.get(f"{BASE_URL}/api/remedies?limit=5", timeout=10)))
    results.append(check("GET /api/first-aid/emergency",
                         session.get(f"{BASE_URL}/api/first-aid/emergency", timeout=10)))
    results.append(check("POST /api/symptoms/analyze",
                         session.post(f"{BASE_URL}/api/symptoms/analyze",
                                      json={"symptoms": ["fever", "cough"]}, timeout=10)))

    print("\n👤 USERS:")
    suffix = uuid.uuid4().hex[:8]
    user = {"username": f"smoke{suffix}", "email": f"smoke{suffix}@example.com", "password": "smoke123"}
    response = session.post(f"{BASE_URL}/api/users/register", json=user, timeout=10)
    results.append(check("POST /api/users/register", response, 201))
    token = response.json().get("data", {}).get("token") if response.ok else None

    if token:
        headers = {"Authorization": f"Bearer {token}"}
        print(f"  Token: {token[:20]}...")
        results.append(check("GET /api/users/profile",
                             session.get(f"{BASE_URL}/api/users/profile", headers=headers, timeout=10)))
        results.append(check("POST /api/favorites/sync",
                             session.post(f"{BASE_URL}/api/favorites/sync", headers=headers,
                                          json={"favorites": [{"remedy_id": "ginger-tea"}]}, timeout=10)))

    print("\n💬 CHAT AND QUIZ:")
    results.append(check("POST /api/chat/send",
                         session.post(f"{BASE_URL}/api/chat/send",
                                      json={"message": "I have a headache", "userId": f"smoke-{suffix}"},
                                      timeout=10)))
    results.append(check("GET /api/quiz/first-aid", session.get(f"{BASE_URL}/api/quiz/first-aid", timeout=10)))
    results.append(check("POST /api/quiz/first-aid/submit",
                         session.post(f"{BASE_URL}/api/quiz/first-aid/submit",
                                      json={"answers": {"1": 1, "2": 1}, "userId": f"smoke-{suffix}"},
                                      timeout=10)))

    passed = sum(results)
    print("\n" + "=" * 50)
    print(f"🎯 {passed}/{len(results)} checks passed")
    return passed == len(results)


if __name__ == "__main__":
    raise SystemExit(0 if run_smoke_test() else 1)
