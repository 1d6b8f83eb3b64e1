import enum

class PostVisibility(str, enum.Enum):
    draft     = "draft"
    published = "published"

    @classmethod
    def from_flag(cls, published: bool) -> "PostVisibility":
        return cls.published if published else cls.draft
