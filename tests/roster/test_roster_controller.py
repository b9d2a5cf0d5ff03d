def test_list_returns_demo_roster_and_counts(client):
    resp = client.get("/api/roster")
    body = resp.get_json()

    assert resp.status_code == 200
    assert [s["id"] for s in body["students"]] == [1, 2, 3, 4, 5]
    assert body["counts"] == {"total": 5, "present": 0, "absent": 0, "unmarked": 5}


def test_search_by_id(client):
    body = client.get("/api/roster?q=3").get_json()
    assert [s["name"] for s in body["students"]] == ["Carla Singh"]
    assert body["counts"]["total"] == 5


def test_add_student(client):
    resp = client.post("/api/roster/students", json={"name": " Frank "})
    assert resp.status_code == 201
    assert resp.get_json()["student"] == {"id": 6, "name": "Frank", "status": "Unmarked"}


def test_add_student_with_form_post(client):
    resp = client.post("/api/roster/students", data={"name": "Gina"})
    assert resp.status_code == 201


def test_add_blank_name_is_bad_request(client):
    resp = client.post("/api/roster/students", json={"name": "  "})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_mark_toggle_and_remove(client):
    assert client.post("/api/roster/students/1/mark", json={"status": "Absent"}).status_code == 200
    assert client.post("/api/roster/students/1/toggle").status_code == 200
    assert client.delete("/api/roster/students/2").status_code == 200

    students = client.get("/api/roster").get_json()["students"]
    assert students[0]["status"] == "Present"
    assert 2 not in [s["id"] for s in students]


def test_mark_with_unknown_status_is_bad_request(client):
    resp = client.post("/api/roster/students/1/mark", json={"status": "Late"})
    assert resp.status_code == 400


def test_mark_all_and_reset(client):
    client.post("/api/roster/mark-all", json={"status": "Present"})
    assert client.get("/api/roster").get_json()["counts"]["present"] == 5

    client.post("/api/roster/reset")
    assert client.get("/api/roster").get_json()["counts"]["unmarked"] == 5


def test_export_is_csv_attachment(client):
    resp = client.get("/api/roster/export")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attendance.csv" in resp.headers["Content-Disposition"]
    assert resp.get_data(as_text=True).splitlines()[:2] == ["Id,Name,Status", '1,"Alice Johnson",Unmarked']


def test_import_replaces_roster(client):
    resp = client.post("/api/roster/import", json={"text": "7,Grace,Present\nHenry,Absent"})
    assert resp.get_json()["imported"] == 2

    students = client.get("/api/roster").get_json()["students"]
    assert students == [
        {"id": 7, "name": "Grace", "status": "Present"},
        {"id": 6, "name": "Henry", "status": "Absent"},
    ]


def test_import_empty_text_is_rejected(client):
    resp = client.post("/api/roster/import", json={"text": "   "})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Paste CSV text first"
    assert client.get("/api/roster").get_json()["counts"]["total"] == 5


def test_add_with_null_name_is_bad_request(client):
    resp = client.post("/api/roster/students", json={"name": None})

    assert resp.status_code == 400
    assert client.get("/api/roster").get_json()["counts"]["total"] == 5


def test_mark_with_null_status_is_bad_request(client):
    assert client.post("/api/roster/students/1/mark", json={"status": None}).status_code == 400
    assert client.post("/api/roster/mark-all", json={"status": None}).status_code == 400


def test_import_with_null_text_is_rejected(client):
    resp = client.post("/api/roster/import", json={"text": None})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Paste CSV text first"
