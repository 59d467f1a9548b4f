from django.db import models
from django.utils import timezone


class CheckoutRecord(models.Model):
    name = models.CharField(max_length=255)
    # Format is not validated server-side; any non-empty string is accepted
    email = models.CharField(max_length=254)
    cart_items = models.JSONField(default=list)
    total = models.DecimalField(max_digits=12, decimal_places=2)
    timestamp = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"Checkout {self.pk} by {self.email}"

    class Meta:
        db_table = "checkouts"
        ordering = ["-timestamp"]
