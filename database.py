# database.py
import os
import sqlite3
from contextlib import contextmanager

TABLES = (
    'users', 'remedies', 'first_aid', 'symptoms', 'user_favorites',
    'emergency_contacts', 'user_medical_info', 'search_history',
    'chat_history', 'quiz_results', 'admin_users'
)

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username VARCHAR(50) UNIQUE NOT NULL,
        email VARCHAR(100) UNIQUE NOT NULL,
        password_hash VARCHAR(255) NOT NULL,
        full_name VARCHAR(100),
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS remedies (
        id VARCHAR(50) PRIMARY KEY,
        title VARCHAR(200) NOT NULL,
        description TEXT NOT NULL,
        category VARCHAR(50) NOT NULL,
        difficulty VARCHAR(20) NOT NULL CHECK(difficulty IN ('easy', 'medium', 'hard')),
        rating DECIMAL(2,1) DEFAULT 4.0 CHECK(rating >= 0 AND rating <= 5),
        prep_time VARCHAR(50) NOT NULL,
        ingredients TEXT NOT NULL,
        instructions TEXT NOT NULL,
        benefits TEXT NOT NULL,
        warnings TEXT NOT NULL,
        image VARCHAR(10),
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS first_aid (
        id VARCHAR(50) PRIMARY KEY,
        title VARCHAR(200) NOT NULL,
        category VARCHAR(50) NOT NULL,
        emergency BOOLEAN DEFAULT 0,
        description TEXT NOT NULL,
        steps TEXT NOT NULL,
        warnings TEXT NOT NULL,
        severity VARCHAR(20) NOT NULL CHECK(severity IN ('low', 'medium', 'high', 'critical')),
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS symptoms (
        id VARCHAR(50) PRIMARY KEY,
        name VARCHAR(100) NOT NULL UNIQUE,
        severity VARCHAR(20) NOT NULL CHECK(severity IN ('low', 'medium', 'high')),
        description TEXT NOT NULL,
        common_causes TEXT NOT NULL,
        recommendations TEXT NOT NULL,
        when_to_see_doctor TEXT NOT NULL,
        related_remedies TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS user_favorites (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        remedy_id VARCHAR(50),
        first_aid_id VARCHAR(50),
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE,
        FOREIGN KEY (remedy_id) REFERENCES remedies(id) ON DELETE CASCADE,
        FOREIGN KEY (first_aid_id) REFERENCES first_aid(id) ON DELETE CASCADE,
        UNIQUE(user_id, remedy_id),
        UNIQUE(user_id, first_aid_id),
        CHECK((remedy_id IS NOT NULL AND first_aid_id IS NULL) OR
              (remedy_id IS NULL AND first_aid_id IS NOT NULL))
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS emergency_contacts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        name VARCHAR(100) NOT NULL,
        phone VARCHAR(20) NOT NULL,
        relation VARCHAR(50),
        is_favorite BOOLEAN DEFAULT 0,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS user_medical_info (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL UNIQUE,
        blood_type VARCHAR(10),
        allergies TEXT,
        medications TEXT,
        medical_conditions TEXT,
        emergency_contact VARCHAR(100),
        emergency_phone VARCHAR(20),
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS search_history (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER,
        search_term VARCHAR(200) NOT NULL,
        search_type VARCHAR(20) NOT NULL CHECK(search_type IN ('remedy', 'first_aid', 'symptom')),
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS chat_history (
        id VARCHAR(50) PRIMARY KEY,
        user_id VARCHAR(100) NOT NULL,
        user_message TEXT NOT NULL,
        bot_response TEXT NOT NULL,
        suggested_remedies TEXT,
        timestamp DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS quiz_results (
        id VARCHAR(50) PRIMARY KEY,
        user_id VARCHAR(100) NOT NULL,
        quiz_type VARCHAR(50) NOT NULL,
        score INTEGER NOT NULL,
        total_questions INTEGER NOT NULL,
        answers TEXT NOT NULL,
        completed_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS admin_users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username VARCHAR(50) UNIQUE NOT NULL,
        email VARCHAR(100) UNIQUE NOT NULL,
        password_hash VARCHAR(255) NOT NULL,
        role VARCHAR(20) DEFAULT 'admin' CHECK(role IN ('admin', 'super_admin')),
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_chat_history_user ON chat_history (user_id, timestamp)",
    "CREATE INDEX IF NOT EXISTS idx_quiz_results_user ON quiz_results (user_id, quiz_type, completed_at)",
    "CREATE INDEX IF NOT EXISTS idx_search_history_user ON search_history (user_id, created_at)",
]


def get_connection(path):
    """
    Returns a SQLite connection with dict-like rows and foreign keys enforced.
    """
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_db(path):
    """Connection context manager: commit on success, rollback on error"""
    conn = get_connection(path)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(path):
    """
    Create the database directory and every table used by the API.
    """
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)

    with get_db(path) as conn:
        for statement in SCHEMA:
            conn.execute(statement)


def execute(conn, sql, params=()):
    """Run a write statement and return (lastrowid, rowcount)"""
    cur = conn.execute(sql, params)
    return cur.lastrowid, cur.rowcount


def fetch_one(conn, sql, params=()):
    row = conn.execute(sql, params).fetchone()
    return dict(row) if row is not None else None


def fetch_all(conn, sql, params=()):
    return [dict(row) for row in conn.execute(sql, params).fetchall()]


def count_rows(conn, table):
    if table not in TABLES:
        raise ValueError(f"Unknown table: {table}")
    return conn.execute(f"SELECT COUNT(*) AS count FROM {table}").fetchone()['count']


def health_check(path):
    try:
        with get_db(path) as conn:
            row = conn.execute("SELECT 1 AS healthy").fetchone()
        return row is not None and row['healthy'] == 1
    except sqlite3.Error:
        return False
