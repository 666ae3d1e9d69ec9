import os
from dotenv import load_dotenv

# Load environment variables (only in development)
# In containers, environment variables are set directly
if os.getenv("ENVIRONMENT") != "production":
    load_dotenv()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# Database configuration
DATABASE_TYPE = os.getenv("DATABASE_TYPE", "mongodb")  # Options: 'mongodb', 'memory'

# MongoDB configuration
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DATABASE = os.getenv("MONGODB_DATABASE", "paper")
FOLDER_COLLECTION_NAME = os.getenv("FOLDER_COLLECTION_NAME", "folders")

# JWT
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change_this_in_production")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

# CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]
CORS_METHODS = ["GET", "POST", "PUT", "DELETE"]
CORS_HEADERS = ["authorization", "content-type"]

# API documentation
OPENAPI_URL = "/api-doc/openapi.json"
DOCS_URL = "/swagger-ui"
