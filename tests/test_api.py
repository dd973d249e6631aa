import pytest


def _state(repetition_count=0, easiness_factor=2.5, interval_days=1, next_review_on="2025-05-20"):
    return {
        "repetition_count": repetition_count,
        "easiness_factor": easiness_factor,
        "interval_days": interval_days,
        "next_review_on": next_review_on,
    }


def _samples(weights, reps=5):
    return [
        {
            "session_id": f"w{i}",
            "session_date": f"2025-01-{i + 1:02d}",
            "weight": weight,
            "reps": reps,
        }
        for i, weight in enumerate(weights)
    ]


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_root_lists_endpoints(client):
    data = client.get("/").json()

    assert "reviews" in data["endpoints"]
    assert "strength" in data["endpoints"]


def test_new_review_state(client):
    resp = client.get("/reviews/new", params={"created_on": "2025-05-20"})

    assert resp.status_code == 200
    assert resp.json() == _state()


def test_review_first_success(client):
    resp = client.post("/reviews", json={
        "state": _state(),
        "grade": 5,
        "today": "2025-05-20",
    })
    data = resp.json()

    assert resp.status_code == 200
    assert data["grade_label"] == "perfect recall"
    assert data["state"]["repetition_count"] == 1
    assert data["state"]["interval_days"] == 1
    assert data["state"]["next_review_on"] == "2025-05-21"
    assert data["state"]["easiness_factor"] == pytest.approx(2.6)


def test_review_lapse(client):
    resp = client.post("/reviews", json={
        "state": _state(repetition_count=4, easiness_factor=2.2, interval_days=30),
        "grade": 1,
        "today": "2025-05-20",
    })
    state = resp.json()["state"]

    assert state["repetition_count"] == 0
    assert state["interval_days"] == 1
    assert state["next_review_on"] == "2025-05-21"


@pytest.mark.parametrize("grade", [-1, 6])
def test_review_rejects_out_of_range_grade(client, grade):
    resp = client.post("/reviews", json={"state": _state(), "grade": grade})

    assert resp.status_code == 422


def test_review_rejects_invalid_state(client):
    resp = client.post("/reviews", json={
        "state": _state(easiness_factor=1.0),
        "grade": 4,
    })

    assert resp.status_code == 422


def test_due_items(client):
    resp = client.post("/reviews/due", json={
        "today": "2025-05-20",
        "items": [
            {"item_id": "hola", "state": _state(next_review_on="2025-05-20")},
            {"item_id": "adios", "state": _state(next_review_on="2025-05-25")},
            {"item_id": "gracias", "state": _state(next_review_on="2025-05-01")},
        ],
    })
    data = resp.json()

    assert resp.status_code == 200
    assert data["due_count"] == 2
    assert data["item_ids"] == ["gracias", "hola"]


def test_calculate_one_rep_max(client):
    resp = client.get("/strength/1rm/calculate", params={"weight": 100, "reps": 5})
    data = resp.json()

    assert resp.status_code == 200
    assert data["formula"] == "epley"
    assert data["estimated_1rm"] == 116.7


def test_calculate_one_rep_max_brzycki(client):
    resp = client.get("/strength/1rm/calculate",
                      params={"weight": 100, "reps": 5, "formula": "brzycki"})

    assert resp.json()["estimated_1rm"] == 112.5


def test_calculate_one_rep_max_rejects_zero_reps(client):
    resp = client.get("/strength/1rm/calculate", params={"weight": 100, "reps": 0})

    assert resp.status_code == 422


def test_trend_positive(client):
    resp = client.post("/strength/trend", json={"samples": _samples([50, 60, 70]), "last_n": 3})
    data = resp.json()

    assert resp.status_code == 200
    assert data["sessions_used"] == 3
    assert data["slope"] == pytest.approx(10.0)
    assert data["direction"] == "up"


def test_trend_defaults_window(client):
    resp = client.post("/strength/trend", json={"samples": _samples([90, 50, 60, 70])})
    data = resp.json()

    assert data["last_n"] == 3
    assert data["sessions_used"] == 3
    assert data["direction"] == "up"


def test_trend_empty_is_flat(client):
    data = client.post("/strength/trend", json={"samples": []}).json()

    assert data["slope"] == 0.0
    assert data["direction"] == "flat"


def test_trend_on_one_rep_max_axis(client):
    samples = _samples([60, 60])
    samples[1]["reps"] = 10

    resp = client.post("/strength/trend", json={"samples": samples, "y_axis": "one_rep_max"})

    assert resp.json()["direction"] == "up"


def test_trend_rejects_bad_window(client):
    resp = client.post("/strength/trend", json={"samples": [], "last_n": 0})

    assert resp.status_code == 422


def test_one_rep_max_history(client):
    resp = client.post("/strength/1rm/history", json={"samples": _samples([100, 110]), "last_n": 5})
    data = resp.json()

    assert resp.status_code == 200
    assert [p["session_id"] for p in data] == ["w0", "w1"]
    assert data[0]["one_rep_max"] == 116.7
    assert data[1]["session_date"] == "2025-01-02"


def test_calculate_one_rep_max_accepts_high_reps(client):
    resp = client.get("/strength/1rm/calculate", params={"weight": 50, "reps": 31})

    assert resp.status_code == 200
    assert resp.json()["estimated_1rm"] == 101.7


def test_calculate_one_rep_max_brzycki_out_of_domain(client):
    resp = client.get("/strength/1rm/calculate",
                      params={"weight": 50, "reps": 40, "formula": "brzycki"})

    assert resp.status_code == 422
    assert "Brzycki" in resp.json()["detail"]
