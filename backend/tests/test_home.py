class TestHome:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"

    def test_empty_index(self, client):
        r = client.get("/api/v1/")
        assert r.status_code == 200
        assert r.json() == {"activities": []}

    def test_index_lists_activities_by_start(self, client):
        contact_id = client.post("/api/v1/contacts", json={"name": "Peter Smith"}).json()["id"]
        first = client.post("/api/v1/job-openings", json={
            "title": "Senior Developer",
            "organization": "Acme Software",
            "advertised_date": "2026-03-02T09:00:00",
        }).json()["id"]
        second = client.post("/api/v1/job-openings", json={
            "title": "Data Engineer",
            "organization": "Initech",
            "advertised_date": "2026-03-01T09:00:00",
        }).json()["id"]

        client.post(f"/api/v1/job-openings/{first}/apply", json={
            "application_time": "2026-03-04T10:15:00",
            "contact_id": contact_id,
        })
        client.post(f"/api/v1/job-openings/{second}/apply", json={
            "application_time": "2026-03-05T08:00:00",
            "contact_id": contact_id,
        })

        activities = client.get("/api/v1/").json()["activities"]
        assert activities[0] == "2026-03-04 10:15 Applied. (Peter Smith, done)"
        assert activities[1] == "2026-03-05 08:00 Applied. (Peter Smith, done)"
        assert activities[2].startswith("2026-03-07 10:15 Application follow up.")
        assert activities[2].endswith("(Peter Smith, pending)")
        assert len(activities) == 4
