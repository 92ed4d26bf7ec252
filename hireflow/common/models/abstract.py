from django.db import models
from django.utils.text import slugify


class TimeStampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    modified_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-created_at', '-modified_at')
        abstract = True


class BaseModel(TimeStampedModel):
    class Meta:
        ordering = ('-created_at', '-modified_at')
        abstract = True


class SlugModel(models.Model):
    slug = models.SlugField(unique=True, max_length=255, blank=True)

    class Meta:
        abstract = True

    def _get_slug_text(self):
        assert any([hasattr(self, 'name'), hasattr(self, 'title')])
        slug_text = ''
        if hasattr(self, 'name'):
            slug_text = self.name.lower()
        elif hasattr(self, 'title'):
            slug_text = self.title.lower()
        return slug_text

    def _unique_slugify(self, slug_text):
        base_slug = slugify(slug_text)[:240] or self.__class__.__name__.lower()
        slug, suffix = base_slug, 1
        qs = self.__class__.objects.exclude(pk=self.pk)
        while qs.filter(slug=slug).exists():
            suffix += 1
            slug = f'{base_slug}-{suffix}'
        self.slug = slug

    def save(self, *args, **kwargs):
        # explicitly given slugs (e.g. the demo agency) are kept as they are
        if not self.slug:
            self._unique_slugify(self._get_slug_text())
        return super().save(*args, **kwargs)
