"""Welcome email composition and sending."""

from typing import Protocol

import logfire

from schemas.confirmation import EmailSendResult, SendEmailRequest, SubmissionRequest
from services.exceptions import EmailSendError


class TextGenerator(Protocol):
    async def generate(self, name: str, industry: str) -> str: ...


class EmailSender(Protocol):
    async def send(self, request: SendEmailRequest) -> EmailSendResult: ...


def build_subject(name: str) -> str:
    return f"Welcome to the Innovation Revolution, {name}! 🚀"


def build_html(content: str, industry: str) -> str:
    """
    Render the welcome email body.

    The generated content is embedded as-is with newlines turned into <br>.
    """
    body = content.replace("\n", "<br>")
    return f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
          <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #333; margin-bottom: 10px;">🚀 Welcome to the Innovation Revolution!</h1>
          </div>

          <div style="background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); padding: 30px; border-radius: 10px; color: white; margin-bottom: 30px;">
            <div style="font-size: 18px; line-height: 1.6;">
              {body}
            </div>
          </div>

          <div style="background: #f8f9fa; padding: 25px; border-radius: 8px; margin-bottom: 25px;">
            <h3 style="color: #333; margin-top: 0;">What's Next?</h3>
            <ul style="color: #666; line-height: 1.6;">
              <li>🎯 <strong>Exclusive insights</strong> tailored to {industry}</li>
              <li>💡 <strong>Early access</strong> to industry-changing innovations</li>
              <li>🤝 <strong>Connect</strong> with {industry} leaders</li>
              <li>📈 <strong>Transform</strong> your approach to {industry} challenges</li>
            </ul>
          </div>

          <div style="text-align: center; padding: 20px 0; border-top: 1px solid #eee;">
            <p style="color: #666; margin: 0;">
              Ready to revolutionize {industry}?<br>
              <strong>The Innovation Community Team</strong>
            </p>
          </div>
        </div>
      """


def build_send_request(submission: SubmissionRequest, content: str, email_from: str) -> SendEmailRequest:
    return SendEmailRequest(
        from_=email_from,
        to=[submission.email],
        subject=build_subject(submission.name),
        html=build_html(content, submission.industry),
    )


async def send_welcome_email(
    submission: SubmissionRequest,
    generator: TextGenerator,
    sender: EmailSender,
    email_from: str
) -> EmailSendResult:
    """
    Generate the personalized copy, then send the welcome email.

    Both calls are made exactly once and in order; the generator never
    fails outward.

    Args:
        submission: Validated form submission
        generator: Content generator (real or fallback text)
        sender: Email provider client
        email_from: Fixed sender identity

    Returns:
        Successful EmailSendResult

    Raises:
        EmailSendError: If the provider rejected the send
    """
    with logfire.span("welcome_email.send", industry=submission.industry):
        content = await generator.generate(submission.name, submission.industry)

        result = await sender.send(build_send_request(submission, content, email_from))

        if not result.success:
            raise EmailSendError(result.error_message or "Unknown error")

        logfire.info("Welcome email sent", email_id=result.message_id)
        return result
