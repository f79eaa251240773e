from app.core.security import verify_password
from app.shared.database.models import Category, User


def test_list_customers_only_returns_customers(client, customer, seller):
    response = client.get("/api/v1/clientes")

    assert response.status_code == 200
    assert response.json() == [
        {"id": customer.id, "firstName": "María", "lastName": "López", "email": "maria@example.com"}
    ]


def test_get_customer(client, customer, seller):
    assert client.get(f"/api/v1/clientes/{customer.id}").json()["email"] == "maria@example.com"
    assert client.get(f"/api/v1/clientes/{seller.id}").status_code == 404


def test_list_products(client, make_product):
    older = make_product(name="Cargador", price="15.00", stock=60)
    newer = make_product(name="Toallas", price="22.00", stock=15)

    response = client.get("/api/v1/productos")

    assert response.status_code == 200
    products = response.json()
    assert [p["id"] for p in products] == [newer.id, older.id]
    assert products[1]["price"] == 15.0
    assert products[1]["stock"] == 60
    assert products[1]["active"] is True
    assert products[1]["category"] == "GENERAL"


def test_get_unknown_product(client):
    response = client.get("/api/v1/productos/99")

    assert response.status_code == 404
    assert response.json()["error_code"] == "NOT_FOUND"


def test_toggle_product_active(client, make_product):
    product = make_product()

    response = client.patch("/api/v1/productos", json={"id": product.id, "active": False})

    assert response.status_code == 200
    assert response.json()["active"] is False
    assert client.get(f"/api/v1/productos/{product.id}").json()["active"] is False


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/api/v1/health").json()["modules"]["ventas"]["status"] == "active"


def test_create_product_creates_missing_category(client, db):
    response = client.post(
        "/api/v1/productos",
        json={"name": "Lámpara", "description": "LED", "price": 18.5, "stock": 7, "category": "hogar"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Lámpara"
    assert body["price"] == 18.5
    assert body["stock"] == 7
    assert body["active"] is True
    assert body["category"] == "HOGAR"

    again = client.post(
        "/api/v1/productos",
        json={"name": "Cortina", "price": 30, "category": "HOGAR"},
    )
    assert again.json()["category"] == "HOGAR"
    assert db.query(Category).filter(Category.name == "HOGAR").count() == 1


def test_create_product_rejects_negative_stock(client):
    response = client.post(
        "/api/v1/productos",
        json={"name": "Lámpara", "price": 18.5, "stock": -1, "category": "HOGAR"},
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_delete_product(client, make_product):
    product = make_product()

    response = client.request("DELETE", "/api/v1/productos", json={"id": product.id})

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert client.get(f"/api/v1/productos/{product.id}").status_code == 404


def test_delete_unknown_product(client):
    response = client.request("DELETE", "/api/v1/productos", json={"id": 99})

    assert response.status_code == 404


def test_product_with_sales_cannot_be_deleted(client, customer, make_product, stock_of):
    product = make_product(stock=5)
    client.post(
        "/api/v1/ventas",
        json={"customerId": customer.id, "items": [{"productId": product.id, "quantity": 1, "unitPrice": 10}]},
    )

    response = client.request("DELETE", "/api/v1/productos", json={"id": product.id})

    assert response.status_code == 400
    assert response.json()["error_code"] == "VALIDATION_ERROR"
    assert response.json()["details"]["sale_items"] == 1
    assert stock_of(product.id) == 4


def test_create_user_stores_bcrypt_hash(client, db):
    response = client.post(
        "/api/v1/usuarios",
        json={
            "firstName": "Pedro",
            "lastName": "Gómez",
            "email": "Pedro@Example.com",
            "password": "secreto123",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "pedro@example.com"
    assert body["userType"] == "CLIENTE"
    assert body["active"] is True
    assert "password" not in body
    assert "passwordHash" not in body

    user = db.query(User).filter(User.email == "pedro@example.com").one()
    assert user.password_hash != "secreto123"
    assert verify_password("secreto123", user.password_hash)


def test_create_user_rejects_duplicate_email(client, customer):
    response = client.post(
        "/api/v1/usuarios",
        json={"firstName": "Otra", "email": "maria@example.com", "password": "secreto123"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "El correo electrónico ya está registrado"


def test_list_users_includes_every_type(client, customer, seller):
    response = client.get("/api/v1/usuarios")

    assert response.status_code == 200
    users = response.json()
    assert [u["userType"] for u in users] == ["CLIENTE", "VENDEDOR"]
    assert all("passwordHash" not in u for u in users)


def test_toggle_user_active(client, seller):
    response = client.patch("/api/v1/usuarios", json={"id": seller.id, "active": False})

    assert response.status_code == 200
    assert response.json()["active"] is False
    assert client.patch("/api/v1/usuarios", json={"id": 99, "active": False}).status_code == 404


def test_delete_user(client, seller):
    response = client.request("DELETE", "/api/v1/usuarios", json={"id": seller.id})

    assert response.status_code == 200
    assert client.get("/api/v1/usuarios").json() == []
    assert client.request("DELETE", "/api/v1/usuarios", json={"id": seller.id}).status_code == 404


def test_customer_with_sales_cannot_be_deleted(client, customer, make_product):
    product = make_product(stock=5)
    client.post(
        "/api/v1/ventas",
        json={"customerId": customer.id, "items": [{"productId": product.id, "quantity": 1, "unitPrice": 10}]},
    )

    response = client.request("DELETE", "/api/v1/usuarios", json={"id": customer.id})

    assert response.status_code == 400
    assert response.json()["details"] == {"user_id": customer.id, "sales": 1}
