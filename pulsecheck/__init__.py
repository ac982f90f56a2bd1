"""
pulsecheck - dependency health reporting service

Layer Structure:
- Domain: probe contract, health outcomes and the aggregation engine
- Application: use cases, DTOs and the HTTP response mapping
- Infrastructure: database and cache clients and their probes
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
