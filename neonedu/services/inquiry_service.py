"""
Inquiry Service - relays visitor messages through the EmailJS REST API
"""
from typing import Dict
import requests
from flask import current_app
from neonedu.exceptions import InquiryError


class InquiryService:
    """Sends landing-page inquiries to the business inbox"""

    SEND_URL = 'https://api.emailjs.com/api/v1.0/email/send'

    FAILED = 'Failed to send message. Please try again.'

    STATUS_MESSAGES = {
        400: 'Invalid request. Please check the email service configuration.',
        412: 'Email template validation failed. Please contact support.',
        429: 'Too many requests. Please try again in a few minutes.',
    }

    @staticmethod
    def template_params(inquiry: Dict, recipient: str) -> Dict:
        """Template variables expected by the inquiry email template"""
        email = inquiry['email'].strip()
        return {
            'user_name': f"{inquiry['first_name'].strip()} {inquiry['last_name'].strip()}",
            'user_email': email,
            'user_phone': inquiry['phone'].strip(),
            'message': inquiry['message'].strip(),
            'reply_to': email,
            'to_email': recipient,
        }

    @classmethod
    def send(cls, inquiry: Dict) -> None:
        """
        Relay one inquiry

        Args:
            inquiry: first_name, last_name, phone, email and message

        Raises:
            InquiryError: service not configured, provider rejected the
                message or the request failed
        """
        config = current_app.config
        if not (config['EMAILJS_SERVICE_ID'] and config['EMAILJS_TEMPLATE_ID']
                and config['EMAILJS_PUBLIC_KEY']):
            print("[InquiryService] EmailJS is not configured", flush=True)
            raise InquiryError('Email service is not configured', 503)

        payload = {
            'service_id': config['EMAILJS_SERVICE_ID'],
            'template_id': config['EMAILJS_TEMPLATE_ID'],
            'user_id': config['EMAILJS_PUBLIC_KEY'],
            'template_params': cls.template_params(inquiry, config['INQUIRY_RECIPIENT']),
        }
        # Server-side sends need the private key in strict mode
        if config['EMAILJS_PRIVATE_KEY']:
            payload['accessToken'] = config['EMAILJS_PRIVATE_KEY']

        print(f"[InquiryService] Sending inquiry from {payload['template_params']['user_email']}",
              flush=True)

        try:
            response = requests.post(cls.SEND_URL, json=payload, timeout=config['INQUIRY_TIMEOUT'])
        except requests.exceptions.Timeout:
            print("[InquiryService] Send timed out", flush=True)
            raise InquiryError(cls.FAILED, 504)
        except requests.exceptions.RequestException as e:
            print(f"[InquiryService] Send error: {e}", flush=True)
            raise InquiryError(cls.FAILED)

        if not response.ok:
            print(f"[InquiryService] EmailJS answered {response.status_code}: {response.text}",
                  flush=True)
            raise InquiryError(cls.STATUS_MESSAGES.get(response.status_code, cls.FAILED))

        print("[InquiryService] Inquiry sent", flush=True)
