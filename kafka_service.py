import json
from datetime import datetime, timezone

from config import config


class KafkaService:
    def __init__(self, enabled=None, bootstrap_servers=None, topic=None):
        self.available = False
        self.producer = None
        self.topic = topic or config.KAFKA_TOPIC
        self.bootstrap_servers = bootstrap_servers or config.KAFKA_BOOTSTRAP_SERVERS
        self.enabled = config.KAFKA_ENABLED if enabled is None else enabled
        # Only initialize if Kafka is enabled
        if self.enabled:
            self.initialize()
        else:
            print("💡 Kafka is disabled in environment variables")

    def initialize(self):
        """Initialize Kafka producer if the broker is reachable"""
        try:
            from kafka import KafkaProducer
            from kafka.errors import KafkaError

            try:
                self.producer = KafkaProducer(
                    bootstrap_servers=self.bootstrap_servers,
                    value_serializer=lambda v: json.dumps(v, default=str).encode('utf-8'),
                    key_serializer=lambda v: str(v).encode('utf-8'),
                    acks='all',
                    retries=3
                )
                self.available = True
                print("✅ Kafka producer initialized successfully!")
            except KafkaError as e:
                print(f"❌ Kafka connection failed: {e}")
                print("💡 Continuing without Kafka messaging.")
        except ImportError:
            print("❌ kafka-python not installed. Continuing without Kafka messaging.")

    def publish(self, event_type, payload, key=None):
        """Send a domain event; returns False when Kafka is unavailable or the send fails"""
        if not (self.available and self.producer):
            return False

        message = {
            "event_type": event_type,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **payload
        }
        try:
            future = self.producer.send(topic=self.topic, key=key or event_type, value=message)
            future.get(timeout=10)
            return True
        except Exception as e:
            print(f"❌ Failed to send {event_type} to Kafka: {e}")
            return False

    def user_registered(self, user):
        return self.publish('user_registered', {
            "user_id": user['id'],
            "username": user['username']
        }, key=user['id'])

    def chat_message(self, user_id, user_message, bot_response, alert_level=None):
        return self.publish('chat_message', {
            "user_id": user_id,
            "user_message": user_message,
            "bot_response": bot_response,
            "alert_level": alert_level
        }, key=user_id)

    def sync_completed(self, user_id, kind, stats):
        return self.publish('sync_completed', {
            "user_id": user_id,
            "kind": kind,
            "stats": stats
        }, key=user_id)

    def close(self):
        """Close Kafka producer"""
        if self.producer:
            self.producer.close()


# Create a global instance
kafka_service = KafkaService()
