"""Election API - views and schemas."""
