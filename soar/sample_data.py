"""
Built-in sample: a microservices e-commerce platform that uses every node
kind and every connection kind, with nesting down to depth 3.
"""

import copy

from soar.schema.models import AnalysisResult

SAMPLE_ARCHITECTURE = {
    "name": "E-Commerce Platform",
    "version": "2.1.0",
    "description": "Modern microservices-based e-commerce platform with event-driven architecture",
    "generatedAt": "2025-01-15T10:00:00Z",
    "sourceRepository": "https://github.com/example/ecommerce-platform",
    "nodes": [
        {
            "id": "api-gateway",
            "name": "API Gateway",
            "kind": "gateway",
            "description": "Kong-based API gateway handling authentication, rate limiting, and routing",
            "technology": "Kong",
            "position": {"x": 0, "y": 8, "z": 0},
        },
        {
            "id": "user-service",
            "name": "User Service",
            "kind": "service",
            "description": "Handles user authentication, profiles, and preferences",
            "language": "TypeScript",
            "framework": "NestJS",
            "position": {"x": -15, "y": 4, "z": -10},
            "health": "healthy",
            "metrics": {"requestsPerSecond": 320, "latencyMs": 42, "errorRate": 0.002},
            "children": [
                {
                    "id": "user-auth-module",
                    "name": "Auth Module",
                    "kind": "module",
                    "description": "JWT authentication and OAuth2 integration",
                    "filePath": "services/user/src/auth/auth.module.ts",
                    "parentId": "user-service",
                    "children": [
                        {
                            "id": "user-auth-controller",
                            "name": "AuthController",
                            "kind": "class",
                            "filePath": "services/user/src/auth/auth.controller.ts",
                            "lineStart": 12,
                            "lineEnd": 140,
                        },
                        {
                            "id": "user-auth-verify-token",
                            "name": "verifyToken",
                            "kind": "function",
                            "filePath": "services/user/src/auth/jwt.ts",
                            "lineStart": 8,
                            "lineEnd": 35,
                        },
                    ],
                },
                {
                    "id": "user-profile-module",
                    "name": "Profile Module",
                    "kind": "module",
                    "description": "User profile management",
                    "filePath": "services/user/src/profile/profile.module.ts",
                },
            ],
        },
        {
            "id": "product-service",
            "name": "Product Service",
            "kind": "service",
            "description": "Product catalog, inventory, and search functionality",
            "language": "Go",
            "framework": "Gin",
            "position": {"x": 0, "y": 4, "z": -15},
            "children": [
                {"id": "product-catalog", "name": "Catalog", "kind": "module",
                 "description": "Product CRUD operations"},
                {"id": "product-search", "name": "Search", "kind": "module",
                 "description": "Elasticsearch-powered product search"},
                {"id": "product-inventory", "name": "Inventory", "kind": "module",
                 "description": "Real-time inventory tracking"},
            ],
        },
        {
            "id": "order-service",
            "name": "Order Service",
            "kind": "service",
            "description": "Order processing, checkout, and fulfillment",
            "language": "Java",
            "framework": "Spring Boot",
            "position": {"x": 15, "y": 4, "z": -10},
            "instances": 3,
            "region": "us-east-1",
            "children": [
                {
                    "id": "order-checkout",
                    "name": "Checkout",
                    "kind": "module",
                    "children": [
                        {"id": "order-checkout-saga", "name": "CheckoutSaga", "kind": "class"},
                    ],
                },
            ],
        },
        {
            "id": "notification-service",
            "name": "Notification Service",
            "kind": "service",
            "description": "Email, SMS, and push notifications",
            "language": "Python",
            "framework": "FastAPI",
            "position": {"x": 20, "y": 4, "z": 5},
        },
        {
            "id": "postgres-main",
            "name": "PostgreSQL",
            "kind": "database",
            "technology": "PostgreSQL 15",
            "position": {"x": -10, "y": 0, "z": 10},
        },
        {
            "id": "redis-cache",
            "name": "Redis Cache",
            "kind": "cache",
            "technology": "Redis 7",
            "position": {"x": 0, "y": 1, "z": 10},
        },
        {
            "id": "kafka",
            "name": "Event Bus",
            "kind": "queue",
            "technology": "Apache Kafka",
            "position": {"x": 10, "y": 5, "z": 10},
        },
        {
            "id": "stripe",
            "name": "Stripe",
            "kind": "external",
            "description": "Payment processing",
            "position": {"x": 25, "y": 6, "z": -5},
        },
        {
            "id": "us-east",
            "name": "US East",
            "kind": "region",
            "region": "us-east-1",
            "position": {"x": 0, "y": 10, "z": 25},
            "children": [
                {
                    "id": "prod-cluster",
                    "name": "Production Cluster",
                    "kind": "cluster",
                    "technology": "Kubernetes",
                    "children": [
                        {"id": "order-pod", "name": "order-service pod", "kind": "container",
                         "instances": 3},
                    ],
                },
            ],
        },
    ],
    "connections": [
        {"id": "gw-user", "sourceId": "api-gateway", "targetId": "user-service",
         "kind": "http", "label": "REST", "dataFlow": "request"},
        {"id": "gw-product", "sourceId": "api-gateway", "targetId": "product-service",
         "kind": "http", "label": "REST", "dataFlow": "request"},
        {"id": "gw-order", "sourceId": "api-gateway", "targetId": "order-service",
         "kind": "grpc", "label": "gRPC", "dataFlow": "request"},
        {"id": "gw-notify-ws", "sourceId": "api-gateway", "targetId": "notification-service",
         "kind": "websocket", "label": "live updates", "bidirectional": True, "dataFlow": "stream"},
        {"id": "user-db", "sourceId": "user-service", "targetId": "postgres-main",
         "kind": "database"},
        {"id": "product-cache", "sourceId": "product-service", "targetId": "redis-cache",
         "kind": "database", "label": "cache reads"},
        {"id": "order-events", "sourceId": "order-service", "targetId": "kafka",
         "kind": "queue", "label": "order.created", "dataFlow": "event"},
        {"id": "notify-consume", "sourceId": "kafka", "targetId": "notification-service",
         "kind": "event", "dataFlow": "event"},
        {"id": "order-payments", "sourceId": "order-service", "targetId": "stripe",
         "kind": "http", "label": "charge", "latencyMs": 180},
        {"id": "auth-imports-profile", "sourceId": "user-auth-module", "targetId": "user-profile-module",
         "kind": "import"},
        {"id": "saga-extends", "sourceId": "order-checkout-saga", "targetId": "user-auth-controller",
         "kind": "inheritance"},
        {"id": "checkout-uses-inventory", "sourceId": "order-checkout", "targetId": "product-inventory",
         "kind": "composition"},
    ],
    "layout": {"type": "force", "spacing": 5},
    "defaultView": {
        "position": {"x": 0, "y": 10, "z": 20},
        "target": {"x": 0, "y": 0, "z": 0},
        "detailLevel": "service",
    },
}

SAMPLE_ANALYSIS = {
    "architecture": SAMPLE_ARCHITECTURE,
    "summary": (
        "An API gateway fronts four services backed by PostgreSQL, Redis and Kafka. "
        "Orders flow through an event bus to notifications."
    ),
    "insights": [
        "Order processing is decoupled from notifications through Kafka",
        "Product reads are cached in Redis",
    ],
    "warnings": [
        "PostgreSQL is a single shared database for several services",
    ],
}


def sample_payload() -> dict:
    """A fresh copy of the sample envelope in wire form."""
    return copy.deepcopy(SAMPLE_ANALYSIS)


def sample_analysis() -> AnalysisResult:
    return AnalysisResult.model_validate(sample_payload())
