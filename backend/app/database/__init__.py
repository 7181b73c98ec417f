from app.database.mongo import MongoDatabase, get_database, JOBS, SKILLS, STATISTICS
