# reset_db.py
from app.core.config import DATABASE_URL
from app.core.database import Base, engine, ensure_database_dir

def reset_database():
    ensure_database_dir(DATABASE_URL)

    print("Dropping all tables...")
    Base.metadata.drop_all(bind=engine)

    print("Recreating tables...")
    Base.metadata.create_all(bind=engine)
    print("Tables recreated successfully.")

if __name__ == "__main__":
    reset_database()
