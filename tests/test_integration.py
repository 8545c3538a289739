"""
Integration tests for the Notes API.

Tests complete workflows across multiple endpoints and the full stack
(routes → services → repositories → database).
"""

from app.models.tenant import Tenant, TenantPlan
from app.models.user import User
from app.seed import seed


def login(client, email, password="password"):
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestCompleteTenantWorkflow:
    """Login → notes → quota → upgrade, for two tenants side by side"""

    def test_free_to_pro_workflow(self, client, tenants):
        # Step 1: Both Acme users log in
        member = login(client, "user@acme.test")
        admin = login(client, "admin@acme.test")

        # Step 2: Member fills the free plan
        ids = []
        for title in ("Q1 goals", "Hiring", "Budget"):
            response = client.post(
                "/notes", headers=member, json={"title": title, "content": f"{title} draft"}
            )
            assert response.status_code == 201
            ids.append(response.json()["id"])

        # Step 3: Fourth note is refused
        response = client.post("/notes", headers=admin, json={"title": "Offsite", "content": "x"})
        assert response.status_code == 403

        # Step 4: Member cannot upgrade, admin can
        assert client.post("/tenants/acme/upgrade", headers=member).status_code == 403
        response = client.post("/tenants/acme/upgrade", headers=admin)
        assert response.status_code == 200
        assert response.json()["plan"] == "pro"

        # Step 5: Creation works again; me reflects the new plan
        response = client.post("/notes", headers=admin, json={"title": "Offsite", "content": "x"})
        assert response.status_code == 201
        assert client.get("/auth/me", headers=member).json()["tenant"]["plan"] == "pro"

        # Step 6: Admin edits a member's note, member deletes it
        response = client.put(f"/notes/{ids[0]}", headers=admin, json={"content": "Revised"})
        assert response.status_code == 200
        assert client.delete(f"/notes/{ids[0]}", headers=member).status_code == 204

        notes = client.get("/notes", headers=member).json()
        assert [note["title"] for note in notes] == ["Offsite", "Budget", "Hiring"]

        # Step 7: Globex sees none of it and is still on the free plan
        globex = login(client, "admin@globex.test")
        assert client.get("/notes", headers=globex).json() == []
        assert client.get("/auth/me", headers=globex).json()["tenant"]["plan"] == "free"


class TestSeed:
    """Provisioning of demo tenants"""

    def test_seed_creates_tenants_and_users(self, db_session, tenants):
        assert set(tenants) == {"acme", "globex"}
        assert db_session.query(Tenant).count() == 2
        assert db_session.query(User).count() == 4

    def test_seed_is_idempotent(self, db_session, tenants):
        tenants["acme"].plan = TenantPlan.PRO
        db_session.commit()

        seed(db_session)

        assert db_session.query(Tenant).count() == 2
        assert db_session.query(User).count() == 4
        db_session.refresh(tenants["acme"])
        assert tenants["acme"].plan.value == "pro"
