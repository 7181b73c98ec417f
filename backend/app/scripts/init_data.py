import asyncio
from dotenv import load_dotenv

# 환경변수 로드
load_dotenv()
from app.database.mongo import MongoDatabase

initial_skills = [
    {"name": "Python", "category": "language"},
    {"name": "Java", "category": "language"},
    {"name": "JavaScript", "category": "language"},
    {"name": "TypeScript", "category": "language"},
    {"name": "Go", "category": "language"},
    {"name": "FastAPI", "category": "framework"},
    {"name": "Django", "category": "framework"},
    {"name": "Spring", "category": "framework"},
    {"name": "React", "category": "framework"},
    {"name": "Node.js", "category": "runtime"},
    {"name": "MongoDB", "category": "database"},
    {"name": "PostgreSQL", "category": "database"},
    {"name": "Redis", "category": "database"},
    {"name": "Docker", "category": "devops"},
    {"name": "Kubernetes", "category": "devops"},
    {"name": "AWS", "category": "cloud"},
]

async def create_indexes(database: MongoDatabase):
    await database.skills.create_index("name", unique=True)
    await database.statistics.create_index("skill", unique=True)
    await database.jobs.create_index("userId")
    print("인덱스 생성 완료")

async def insert_skills(database: MongoDatabase):
    inserted = 0
    for skill in initial_skills:
        result = await database.skills.update_one(
            {"name": skill["name"]},
            {"$setOnInsert": skill},
            upsert=True
        )
        if result.upserted_id is not None:
            inserted += 1
    print(f"초기 기술 목록 삽입 완료: {inserted}건")

async def main():
    database = MongoDatabase()
    database.connect()
    try:
        await create_indexes(database)
        await insert_skills(database)
    finally:
        database.close()

if __name__ == "__main__":
    asyncio.run(main())
