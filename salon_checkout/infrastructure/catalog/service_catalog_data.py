from __future__ import annotations

from decimal import Decimal

from salon_checkout.domain.entities.service_definition import ServiceDefinition


def _service(key: str, name: str, duration: str, price: str, description: str) -> ServiceDefinition:
    return ServiceDefinition(key=key, name=name, duration=duration, price=Decimal(price), description=description)


SERVICE_CATALOG: dict[str, ServiceDefinition] = {
    entry.key: entry
    for entry in (
        _service("haircut", "Haircut & Styling", "45 min", "35", "Professional haircut with styling"),
        _service("beard", "Beard Trim", "20 min", "15", "Beard shaping and trimming"),
        _service("haircut_beard", "Haircut & Beard Combo", "60 min", "45", "Complete haircut and beard styling"),
        _service("long_hair", "Long Hair Styling", "50 min", "40", "Professional long hair styling"),
        _service("styling", "Hair Styling", "30 min", "25", "Professional hair styling"),
        _service("facial", "Facial Treatment", "40 min", "30", "Complete facial treatment"),
        _service("coloring", "Hair Coloring", "90 min", "60", "Professional hair coloring"),
        _service("kids_haircut", "Kids Haircut", "30 min", "20", "Professional kids haircut"),
        _service("head_massage", "Head Massage", "25 min", "25", "Relaxing head massage"),
        _service("cuts_fades", "Cuts and Fades", "50 min", "40", "Professional cuts and fades"),
        _service("perm", "Perm", "120 min", "80", "Professional perm treatment"),
        _service("straightening", "Hair Straightening", "90 min", "70", "Professional hair straightening"),
        _service("shave", "Shave", "15 min", "12", "Professional shave service"),
        _service("eyebrow", "Eyebrow Shaping", "15 min", "10", "Eyebrow shaping and grooming"),
    )
}
