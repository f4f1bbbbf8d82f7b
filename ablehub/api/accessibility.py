from flask import Blueprint, request, jsonify, current_app
from ablehub.extensions import limiter
from ablehub.errors import ValidationError
from ablehub.services.accessibility_service import AccessibilityService
from ablehub.services.identity_service import resolve_identity

accessibility_bp = Blueprint('accessibility', __name__, url_prefix='/api')


def _update_limit():
    return current_app.config.get('ACCESSIBILITY_RATE_LIMIT', '120 per minute')


@accessibility_bp.route('/accessibility', methods=['GET'])
def get_accessibility():
    """
    Erişilebilirlik Ayarlarını Getir
    Kullanıcının kayıtlı ayarlarını döner; kayıt yoksa varsayılan (hepsi false) oluşturulur.
    ---
    tags:
      - Accessibility
    security:
      - Bearer: []
    parameters:
      - name: X-User-Id
        in: header
        type: string
        required: false
        description: Sadece geliştirme ortamında, JWT yoksa kullanılır
    responses:
      200:
        description: Ayar kaydı
        schema:
          $ref: '#/definitions/AccessibilitySettings'
      401:
        description: Kimlik bilgisi yok
      500:
        description: Sunucu hatası
    """
    user_id = resolve_identity()
    return jsonify(AccessibilityService().handle_get(user_id)), 200


@accessibility_bp.route('/accessibility', methods=['PUT'])
@limiter.limit(_update_limit)
def update_accessibility():
    """
    Erişilebilirlik Ayarlarını Güncelle
    Beş bayrağın tamamını birlikte kaydeder (kısmi güncelleme yok).
    ---
    tags:
      - Accessibility
    security:
      - Bearer: []
    parameters:
      - name: body
        in: body
        required: true
        schema:
          type: object
          required:
            - voiceNavigation
            - screenReader
            - highContrast
            - largeText
            - keyboardNav
          properties:
            voiceNavigation:
              type: boolean
            screenReader:
              type: boolean
            highContrast:
              type: boolean
            largeText:
              type: boolean
            keyboardNav:
              type: boolean
    responses:
      200:
        description: Güncellenmiş ayar kaydı
        schema:
          $ref: '#/definitions/AccessibilitySettings'
      400:
        description: Doğrulama hatası, alan bazlı detaylarla
      401:
        description: Kimlik bilgisi yok
      500:
        description: Sunucu hatası
    """
    user_id = resolve_identity()
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("Request body must be valid JSON", details=[{
            "path": [],
            "field": "",
            "code": "invalid_json",
            "expected": "object",
            "received": "undefined",
            "message": "Content-Type must be application/json",
        }])
    return jsonify(AccessibilityService().handle_update(user_id, data)), 200
