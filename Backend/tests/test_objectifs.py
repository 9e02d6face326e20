"""
Tests for the shared goal library and goal assignments.
"""
import pytest


@pytest.fixture
def jean_id(client, marie):
    employees = client.get("/api/employees", headers=marie).json()
    return next(e["id"] for e in employees if e["nom"] == "Jean Dupont")


@pytest.fixture
def objectif_id(client, marie):
    return client.get("/api/objectifs-templates", headers=marie).json()[0]["id"]


@pytest.fixture
def assignation(client, marie, jean_id, objectif_id):
    res = client.post("/api/objectifs-assignes", json={
        "objectif_template_id": objectif_id,
        "employee_id": jean_id,
        "priorite": "haute",
        "date_echeance": "2025-12-31",
        "notes": "A suivre",
    }, headers=marie)
    assert res.status_code == 201, res.text
    return res.json()


# ----------------------------
# Library
# ----------------------------
def test_library_is_seeded_and_ordered(client, marie):
    objectifs = client.get("/api/objectifs-templates", headers=marie).json()
    assert len(objectifs) == 8
    keys = [(o["categorie"], o["titre"]) for o in objectifs]
    assert keys == sorted(keys)


def test_library_is_shared_between_managers(client, marie, pierre):
    created = client.post("/api/objectifs-templates", json={
        "titre": "Prendre la parole en réunion",
        "categorie": "comportemental",
    }, headers=marie)
    assert created.status_code == 201
    assert created.json()["est_actif"] is True

    titres = [o["titre"] for o in client.get("/api/objectifs-templates", headers=pierre).json()]
    assert "Prendre la parole en réunion" in titres


def test_create_template_requires_titre_and_known_categorie(client, marie):
    assert client.post("/api/objectifs-templates", json={"categorie": "performance"}, headers=marie).status_code == 400
    assert client.post("/api/objectifs-templates", json={"titre": "T", "categorie": "sport"}, headers=marie).status_code == 400


def test_update_template(client, marie, objectif_id):
    res = client.put(f"/api/objectifs-templates/{objectif_id}", json={"description": "Nouvelle description"}, headers=marie)
    assert res.status_code == 200
    assert res.json()["description"] == "Nouvelle description"
    assert client.put("/api/objectifs-templates/9999", json={"titre": "X"}, headers=marie).status_code == 404


def test_soft_delete_hides_template(client, marie, objectif_id):
    res = client.delete(f"/api/objectifs-templates/{objectif_id}", headers=marie)
    assert res.status_code == 200
    assert res.json()["message"] == "Objectif désactivé avec succès"

    ids = [o["id"] for o in client.get("/api/objectifs-templates", headers=marie).json()]
    assert objectif_id not in ids
    assert client.get(f"/api/objectifs-templates/{objectif_id}", headers=marie).status_code == 404

    # re-activation through update
    res = client.put(f"/api/objectifs-templates/{objectif_id}", json={"est_actif": True}, headers=marie)
    assert res.json()["est_actif"] is True
    assert client.get(f"/api/objectifs-templates/{objectif_id}", headers=marie).status_code == 200


def test_cannot_assign_inactive_template(client, marie, jean_id, objectif_id):
    client.delete(f"/api/objectifs-templates/{objectif_id}", headers=marie)
    res = client.post("/api/objectifs-assignes", json={
        "objectif_template_id": objectif_id,
        "employee_id": jean_id,
    }, headers=marie)
    assert res.status_code == 404


# ----------------------------
# Assignments
# ----------------------------
def test_assignment_defaults(assignation, jean_id, objectif_id):
    assert assignation["statut"] == "en_cours"
    assert assignation["progres"] == 0
    assert assignation["priorite"] == "haute"
    assert assignation["date_assignation"]
    assert assignation["entretien_id"] is None
    assert assignation["objectifTemplate"]["id"] == objectif_id
    assert assignation["employee"]["id"] == jean_id


def test_default_priority_is_moyenne(client, marie, jean_id, objectif_id):
    res = client.post("/api/objectifs-assignes", json={
        "objectif_template_id": objectif_id,
        "employee_id": jean_id,
    }, headers=marie)
    assert res.json()["priorite"] == "moyenne"


def test_assignment_requires_owned_employee(client, pierre, jean_id, objectif_id):
    res = client.post("/api/objectifs-assignes", json={
        "objectif_template_id": objectif_id,
        "employee_id": jean_id,
    }, headers=pierre)
    assert res.status_code == 404


def test_assignment_during_interview(client, marie, pierre, jean_id, objectif_id):
    entretien = client.post("/api/entretiens", json={
        "employee_id": jean_id,
        "type": "bimestriel",
        "date_prevue": "2025-03-01T14:00:00",
        "titre": "Point bimestriel",
    }, headers=marie).json()

    res = client.post("/api/objectifs-assignes", json={
        "objectif_template_id": objectif_id,
        "employee_id": jean_id,
        "entretien_id": entretien["id"],
    }, headers=marie)
    assert res.status_code == 201
    assert res.json()["entretien"]["titre"] == "Point bimestriel"

    listed = client.get(f"/api/entretiens/{entretien['id']}/objectifs-assignes", headers=marie).json()
    assert [a["id"] for a in listed] == [res.json()["id"]]


def test_assignment_interview_must_match_employee(client, marie, jean_id, objectif_id):
    employees = client.get("/api/employees", headers=marie).json()
    alice_id = next(e["id"] for e in employees if e["nom"] == "Alice Johnson")
    entretien = client.post("/api/entretiens", json={
        "employee_id": alice_id,
        "type": "annuel",
        "date_prevue": "2025-03-01T14:00:00",
        "titre": "Annuel Alice",
    }, headers=marie).json()

    res = client.post("/api/objectifs-assignes", json={
        "objectif_template_id": objectif_id,
        "employee_id": jean_id,
        "entretien_id": entretien["id"],
    }, headers=marie)
    assert res.status_code == 400


@pytest.mark.parametrize("sent,stored", [
    (150, 100), (-20, 0), (55, 55), (100, 100), (0, 0),
    (150.5, 100), (-0.5, 0), (42.6, 43),
])
def test_progress_is_clamped(client, marie, assignation, sent, stored):
    res = client.put(f"/api/objectifs-assignes/{assignation['id']}", json={"progres": sent}, headers=marie)
    assert res.status_code == 200
    assert res.json()["progres"] == stored


def test_update_without_progress_keeps_it(client, marie, assignation):
    client.put(f"/api/objectifs-assignes/{assignation['id']}", json={"progres": 40}, headers=marie)
    res = client.put(f"/api/objectifs-assignes/{assignation['id']}", json={"statut": "atteint"}, headers=marie)
    assert res.json()["statut"] == "atteint"
    assert res.json()["progres"] == 40


def test_update_rejects_unknown_status(client, marie, assignation):
    res = client.put(f"/api/objectifs-assignes/{assignation['id']}", json={"statut": "fini"}, headers=marie)
    assert res.status_code == 400


def test_assignments_are_scoped(client, marie, pierre, assignation, jean_id):
    aid = assignation["id"]
    assert client.get("/api/objectifs-assignes", headers=pierre).json() == []
    assert client.get(f"/api/objectifs-assignes/{aid}", headers=pierre).status_code == 404
    assert client.put(f"/api/objectifs-assignes/{aid}", json={"progres": 10}, headers=pierre).status_code == 404
    assert client.delete(f"/api/objectifs-assignes/{aid}", headers=pierre).status_code == 404

    assert [a["id"] for a in client.get("/api/objectifs-assignes", headers=marie).json()] == [aid]
    assert [a["id"] for a in client.get(f"/api/employees/{jean_id}/objectifs", headers=marie).json()] == [aid]


def test_delete_assignment(client, marie, assignation):
    res = client.delete(f"/api/objectifs-assignes/{assignation['id']}", headers=marie)
    assert res.status_code == 200
    assert client.get(f"/api/objectifs-assignes/{assignation['id']}", headers=marie).status_code == 404
