from flask import jsonify
from app.extensions import db
from app.utils.dates import utcnow

def home_index():
    return jsonify({
        "message": "Nutrition tracker API",
    })

def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "ok" if db_status == "healthy" else "degraded",
        "database": db_status,
        "timestamp": utcnow().isoformat() + "Z",
    })
